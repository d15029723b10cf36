"""Indentation styles and detection of the style a text uses."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

TAB_WIDTH = 4

_INDENT_RE = re.compile(r"^(?:( )+|\t+)")


class IndentKind(enum.Enum):
    TABS = "tabs"
    SPACES = "spaces"


def _indents_map(text: str, ignore_single_spaces: bool) -> dict:
    indents: dict = {}
    previous_size = 0
    previous_kind = None
    key = None
    for line in text.split("\n"):
        if not line:
            continue
        match = _INDENT_RE.match(line)
        if match is None:
            previous_size = 0
            previous_kind = None
            continue
        size = len(match.group(0))
        kind = IndentKind.SPACES if match.group(1) else IndentKind.TABS
        if ignore_single_spaces and kind is IndentKind.SPACES and size == 1:
            continue
        if kind is not previous_kind:
            previous_size = 0
        previous_kind = kind
        difference = size - previous_size
        previous_size = size
        if difference == 0:
            use, weight = 0, 1
        else:
            use, weight = 1, 0
            key = (kind, abs(difference))
        if key in indents:
            used, weighted = indents[key]
            indents[key] = (used + use, weighted + weight)
        else:
            indents[key] = (1, 0)
    return indents


def _most_used(indents: dict):
    best = None
    max_used = 0
    max_weight = 0
    for key, (used, weight) in indents.items():
        if used > max_used or (used == max_used and weight > max_weight):
            max_used = used
            max_weight = weight
            best = key
    return best


@dataclass(frozen=True)
class Indentation:
    """An indentation style: tabs or a number of spaces."""

    kind: IndentKind
    amount: int

    def __post_init__(self) -> None:
        if self.amount < 1:
            raise ValueError("indentation amount must be at least 1")

    @classmethod
    def default(cls) -> Indentation:
        return cls(IndentKind.SPACES, 4)

    @classmethod
    def detect_indent(cls, text: str) -> Indentation:
        """Guess the indentation used in ``text``, falling back to the default."""
        indents = _indents_map(text, True)
        if not indents:
            indents = _indents_map(text, False)
        key = _most_used(indents)
        if key is None:
            return cls.default()
        kind, amount = key
        return cls(kind, amount)

    def width(self) -> int:
        if self.kind is IndentKind.TABS:
            return TAB_WIDTH
        return self.amount

    def to_next_indent(self, col: int) -> str:
        """Text that moves column ``col`` to the next indentation stop."""
        if self.kind is IndentKind.TABS:
            return "\t"
        rest = col % self.amount
        return " " * (self.amount if rest == 0 else self.amount - rest)

    def from_width(self, width: int) -> str:
        """Whole indentation units that fit into ``width`` columns."""
        single = "\t" if self.kind is IndentKind.TABS else " " * self.amount
        return single * (width // self.width())