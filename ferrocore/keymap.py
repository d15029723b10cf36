"""Mapping key presses to editor commands."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterable

from ferrocore.keycode import KeyCode, KeyKind, KeyModifiers


@dataclass(frozen=True)
class Key:
    """A key together with the modifiers held while pressing it."""

    keycode: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE


class ExclusivenessKind(enum.Enum):
    EXCLUSIVE = "exclusive"
    NON_EXCLUSIVE = "non_exclusive"
    IGNORES = "ignores"


@dataclass(frozen=True)
class Exclusiveness:
    """How strictly a mapping's modifiers must match the pressed ones.

    ``ignored`` is only consulted for :attr:`ExclusivenessKind.IGNORES`.
    """

    kind: ExclusivenessKind
    ignored: KeyModifiers = KeyModifiers.NONE

    @classmethod
    def exclusive(cls) -> Exclusiveness:
        """Modifiers must match exactly."""
        return cls(ExclusivenessKind.EXCLUSIVE)

    @classmethod
    def non_exclusive(cls) -> Exclusiveness:
        """The pressed modifiers must include the mapping's modifiers."""
        return cls(ExclusivenessKind.NON_EXCLUSIVE)

    @classmethod
    def ignores(cls, modifiers: KeyModifiers) -> Exclusiveness:
        """Modifiers must match exactly once ``modifiers`` are disregarded."""
        return cls(ExclusivenessKind.IGNORES, modifiers)

    def accepts(self, key: Key, keycode: KeyCode, modifiers: KeyModifiers) -> bool:
        if key.keycode != keycode:
            return False
        if self.kind is ExclusivenessKind.EXCLUSIVE:
            return key.modifiers == modifiers
        if self.kind is ExclusivenessKind.NON_EXCLUSIVE:
            return (modifiers & key.modifiers) == key.modifiers
        remaining = KeyModifiers(modifiers.value & ~self.ignored.value)
        return remaining == key.modifiers


@dataclass(frozen=True)
class Keymapping:
    """A key bound to a command."""

    key: Key
    cmd: Any
    exclusiveness: Exclusiveness = field(default_factory=Exclusiveness.exclusive)


@dataclass(frozen=True)
class CharCmd:
    """The command for typing a single character."""

    ch: str


def get_command_from_input(
    keycode: KeyCode,
    modifiers: KeyModifiers,
    mappings: Iterable[Keymapping],
) -> Any | None:
    """Find the command bound to a key press.

    The first matching mapping wins; character keys are compared in ASCII
    lower case. A character key with no mapping types itself, unless it is an
    ASCII letter or digit pressed with modifiers other than Shift.
    """
    normalized = keycode.lowercased()
    for mapping in mappings:
        if mapping.exclusiveness.accepts(mapping.key, normalized, modifiers):
            return mapping.cmd

    if keycode.kind is KeyKind.CHAR:
        ch = keycode.value
        is_ascii_alnum = ch.isascii() and ch.isalnum()
        if (
            not is_ascii_alnum
            or modifiers == KeyModifiers.NONE
            or modifiers == KeyModifiers.SHIFT
        ):
            return CharCmd(ch)

    return None