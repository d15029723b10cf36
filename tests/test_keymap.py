import pytest

from ferrocore.keycode import KeyCode, KeyKind, KeyModifiers
from ferrocore.keymap import (
    CharCmd,
    Exclusiveness,
    ExclusivenessKind,
    Key,
    Keymapping,
    get_command_from_input,
)

CTRL = KeyModifiers.CONTROL
SHIFT = KeyModifiers.SHIFT
ALT = KeyModifiers.ALT
SUPER = KeyModifiers.SUPER
NONE = KeyModifiers.NONE


def mapping(keycode, modifiers, cmd, exclusiveness=None):
    if exclusiveness is None:
        return Keymapping(Key(keycode, modifiers), cmd)
    return Keymapping(Key(keycode, modifiers), cmd, exclusiveness)


def test_exclusive_exact_match():
    maps = [mapping(KeyCode.char("s"), CTRL, "save")]
    assert get_command_from_input(KeyCode.char("s"), CTRL, maps) == "save"


def test_exclusive_rejects_extra_modifier():
    maps = [mapping(KeyCode.char("s"), CTRL, "save")]
    assert get_command_from_input(KeyCode.char("s"), CTRL | ALT, maps) is None


def test_uppercase_char_is_normalized():
    maps = [mapping(KeyCode.char("t"), CTRL | SHIFT, "reopen")]
    assert get_command_from_input(KeyCode.char("T"), CTRL | SHIFT, maps) == "reopen"


def test_non_exclusive_allows_extra_modifiers():
    maps = [
        mapping(KeyCode.char("x"), CTRL, "cut", Exclusiveness.non_exclusive())
    ]
    assert get_command_from_input(KeyCode.char("x"), CTRL | ALT, maps) == "cut"
    assert get_command_from_input(KeyCode.char("x"), ALT, maps) is None


def test_ignores_disregards_listed_modifiers():
    ignored = SHIFT | SUPER | ALT
    enter = KeyCode(KeyKind.ENTER)
    maps = [mapping(enter, NONE, "newline", Exclusiveness.ignores(ignored))]
    assert get_command_from_input(enter, SHIFT | ALT, maps) == "newline"
    assert get_command_from_input(enter, NONE, maps) == "newline"
    assert get_command_from_input(enter, CTRL, maps) is None


def test_ignores_with_required_modifier():
    backspace = KeyCode(KeyKind.BACKSPACE)
    maps = [
        mapping(backspace, CTRL, "backspace_word",
                Exclusiveness.ignores(SHIFT | SUPER | ALT)),
    ]
    assert get_command_from_input(backspace, CTRL | SHIFT, maps) == "backspace_word"
    assert get_command_from_input(backspace, SHIFT, maps) is None


def test_first_matching_mapping_wins():
    maps = [
        mapping(KeyCode.char("k"), CTRL, "first"),
        mapping(KeyCode.char("k"), CTRL, "second"),
    ]
    assert get_command_from_input(KeyCode.char("k"), CTRL, maps) == "first"


def test_unmapped_plain_char_types_itself():
    assert get_command_from_input(KeyCode.char("a"), NONE, []) == CharCmd("a")


def test_unmapped_shifted_char_keeps_case():
    assert get_command_from_input(KeyCode.char("A"), SHIFT, []) == CharCmd("A")


def test_unmapped_ctrl_alnum_gives_nothing():
    assert get_command_from_input(KeyCode.char("q"), CTRL, []) is None
    assert get_command_from_input(KeyCode.char("7"), ALT, []) is None


def test_unmapped_ctrl_symbol_types_itself():
    assert get_command_from_input(KeyCode.char("+"), CTRL, []) == CharCmd("+")


def test_non_ascii_letter_with_modifier_types_itself():
    assert get_command_from_input(KeyCode.char("é"), CTRL, []) == CharCmd("é")


def test_unmapped_non_char_key_gives_nothing():
    assert get_command_from_input(KeyCode(KeyKind.HOME), NONE, []) is None


def test_function_key_mapping():
    maps = [mapping(KeyCode.function(5), NONE, "build")]
    assert get_command_from_input(KeyCode.function(5), NONE, maps) == "build"
    assert get_command_from_input(KeyCode.function(6), NONE, maps) is None


def test_keymapping_defaults_to_exclusive():
    m = Keymapping(Key(KeyCode.char("a")), "x")
    assert m.exclusiveness.kind is ExclusivenessKind.EXCLUSIVE
    assert m.key.modifiers == NONE


@pytest.mark.parametrize(
    "factory, kind",
    [
        (Exclusiveness.exclusive, ExclusivenessKind.EXCLUSIVE),
        (Exclusiveness.non_exclusive, ExclusivenessKind.NON_EXCLUSIVE),
    ],
)
def test_exclusiveness_constructors(factory, kind):
    assert factory().kind is kind
    assert factory().ignored == NONE


def test_ignores_constructor_keeps_modifiers():
    exc = Exclusiveness.ignores(SHIFT | ALT)
    assert exc.kind is ExclusivenessKind.IGNORES
    assert exc.ignored == SHIFT | ALT