"""Key codes and modifier flags for keyboard input."""

from __future__ import annotations

import enum
from dataclasses import dataclass


def _camel(snake: str) -> str:
    return "".join(part.capitalize() for part in snake.split("_"))


class KeyModifiers(enum.Flag):
    """Modifier keys held while a key is pressed."""

    NONE = 0
    SHIFT = 0b0000_0001
    CONTROL = 0b0000_0010
    ALT = 0b0000_0100
    SUPER = 0b0000_1000
    HYPER = 0b0001_0000
    META = 0b0010_0000

    def __str__(self) -> str:
        return "".join(
            f" + {label}" for flag, label in _MODIFIER_LABELS if flag in self
        )


_MODIFIER_LABELS = (
    (KeyModifiers.SHIFT, "Shift"),
    (KeyModifiers.CONTROL, "Ctrl"),
    (KeyModifiers.ALT, "Alt"),
    (KeyModifiers.SUPER, "Super"),
    (KeyModifiers.HYPER, "Hyper"),
    (KeyModifiers.META, "Meta"),
)


class MediaKeyCode(enum.Enum):
    PLAY = "play"
    PAUSE = "pause"
    PLAY_PAUSE = "play_pause"
    REVERSE = "reverse"
    STOP = "stop"
    FAST_FORWARD = "fast_forward"
    REWIND = "rewind"
    TRACK_NEXT = "track_next"
    TRACK_PREVIOUS = "track_previous"
    RECORD = "record"
    LOWER_VOLUME = "lower_volume"
    RAISE_VOLUME = "raise_volume"
    MUTE_VOLUME = "mute_volume"


class ModifierKeyCode(enum.Enum):
    LEFT_SHIFT = "left_shift"
    LEFT_CONTROL = "left_control"
    LEFT_ALT = "left_alt"
    LEFT_SUPER = "left_super"
    LEFT_HYPER = "left_hyper"
    LEFT_META = "left_meta"
    RIGHT_SHIFT = "right_shift"
    RIGHT_CONTROL = "right_control"
    RIGHT_ALT = "right_alt"
    RIGHT_SUPER = "right_super"
    RIGHT_HYPER = "right_hyper"
    RIGHT_META = "right_meta"
    ISO_LEVEL3_SHIFT = "iso_level3_shift"
    ISO_LEVEL5_SHIFT = "iso_level5_shift"


class KeyKind(enum.Enum):
    """The kind of a key; some kinds carry a value in :class:`KeyCode`."""

    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TAB = "tab"
    BACK_TAB = "back_tab"
    DELETE = "delete"
    INSERT = "insert"
    F = "f"
    CHAR = "char"
    NULL = "null"
    ESC = "esc"
    CAPS_LOCK = "caps_lock"
    SCROLL_LOCK = "scroll_lock"
    NUM_LOCK = "num_lock"
    PRINT_SCREEN = "print_screen"
    PAUSE = "pause"
    MENU = "menu"
    KEYPAD_BEGIN = "keypad_begin"
    MEDIA = "media"
    MODIFIER = "modifier"


_PAYLOAD_TYPES = {
    KeyKind.F: int,
    KeyKind.CHAR: str,
    KeyKind.MEDIA: MediaKeyCode,
    KeyKind.MODIFIER: ModifierKeyCode,
}


@dataclass(frozen=True)
class KeyCode:
    """A key, with the payload its kind requires."""

    kind: KeyKind
    value: int | str | MediaKeyCode | ModifierKeyCode | None = None

    def __post_init__(self) -> None:
        expected = _PAYLOAD_TYPES.get(self.kind)
        if expected is None:
            if self.value is not None:
                raise ValueError(f"{self.kind.name} keys carry no value")
            return
        if not isinstance(self.value, expected) or isinstance(self.value, bool):
            raise ValueError(
                f"{self.kind.name} keys need a {expected.__name__} value"
            )
        if self.kind is KeyKind.F and not 0 <= self.value <= 255:
            raise ValueError("function key number must fit in a byte")
        if self.kind is KeyKind.CHAR and len(self.value) != 1:
            raise ValueError("a character key holds exactly one character")

    @classmethod
    def char(cls, ch: str) -> KeyCode:
        return cls(KeyKind.CHAR, ch)

    @classmethod
    def function(cls, number: int) -> KeyCode:
        return cls(KeyKind.F, number)

    @classmethod
    def media(cls, code: MediaKeyCode) -> KeyCode:
        return cls(KeyKind.MEDIA, code)

    @classmethod
    def modifier(cls, code: ModifierKeyCode) -> KeyCode:
        return cls(KeyKind.MODIFIER, code)

    def lowercased(self) -> KeyCode:
        """Return the key with an ASCII character lowered; others unchanged."""
        if self.kind is KeyKind.CHAR and self.value.isascii():
            return KeyCode(KeyKind.CHAR, self.value.lower())
        return self

    def __str__(self) -> str:
        if self.kind is KeyKind.F:
            return f"F{self.value}"
        if self.kind is KeyKind.CHAR:
            return self.value
        if self.kind in (KeyKind.MEDIA, KeyKind.MODIFIER):
            return f"{_camel(self.kind.value)}({_camel(self.value.value)})"
        return _camel(self.kind.value)