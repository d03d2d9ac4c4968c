from __future__ import annotations

"""Hangul Unicode codec (domain layer).

Pure bidirectional mapping between a precomposed Hangul syllable
(U+AC00 '가' .. U+D7A3 '힣') and its (choseong, jungseong, jongseong) triple.

Primary API:
- is_hangul_syllable(char)
- decompose(char) -> Syllable
- compose(syllable) -> str

Notes:
  - All syllables live in the BMP, so one `str` character == one code point.
  - Anything outside the block is rejected with NotHangulSyllableError,
    never coerced.
"""

from dataclasses import dataclass, replace
from typing import Final

from hangul_pushdown.domain.enums import Choseong, Jongseong, Jungseong


# Unicode Hangul syllable constants
HANGUL_BASE: Final[int] = 0xAC00
HANGUL_LAST: Final[int] = 0xD7A3

CHOSEONG_COUNT: Final[int] = 19
JUNGSEONG_COUNT: Final[int] = 21
JONGSEONG_COUNT: Final[int] = 28


class NotHangulSyllableError(ValueError):
    """Raised when a character outside U+AC00..U+D7A3 is decomposed."""

    def __init__(self, char: object) -> None:
        self.char = char
        if isinstance(char, str) and len(char) == 1:
            detail = "U+%04X %r" % (ord(char), char)
        else:
            detail = repr(char)
        super().__init__("Not a Hangul syllable: %s" % detail)


@dataclass(frozen=True)
class Syllable:
    choseong: Choseong
    jungseong: Jungseong
    jongseong: Jongseong = Jongseong.Empty

    def __post_init__(self) -> None:
        # Out-of-range indices raise ValueError here; compose() relies on it.
        object.__setattr__(self, "choseong", Choseong(self.choseong))
        object.__setattr__(self, "jungseong", Jungseong(self.jungseong))
        object.__setattr__(self, "jongseong", Jongseong(self.jongseong))

    @classmethod
    def from_char(cls, char: str) -> Syllable:
        return decompose(char)

    def to_char(self) -> str:
        return compose(self)

    def to_jamo(self) -> tuple[str, str, str]:
        """Return the compatibility jamo triple, e.g. ("ㄱ", "ㅏ", "ㄴ") for "간"."""
        return self.choseong.glyph, self.jungseong.glyph, self.jongseong.glyph

    def replace(self, **changes) -> Syllable:
        return replace(self, **changes)

    def __str__(self) -> str:
        return compose(self)


def is_hangul_syllable(char: object) -> bool:
    """True iff `char` is a single character inside the Hangul Syllables block."""
    if not isinstance(char, str) or len(char) != 1:
        return False
    return HANGUL_BASE <= ord(char) <= HANGUL_LAST


def decompose(char: str) -> Syllable:
    """Split a precomposed Hangul syllable into its components.

    Raises:
        NotHangulSyllableError: if `char` is not a Hangul syllable.
    """
    if not is_hangul_syllable(char):
        raise NotHangulSyllableError(char)

    index = ord(char) - HANGUL_BASE
    jong = index % JONGSEONG_COUNT
    jung = (index // JONGSEONG_COUNT) % JUNGSEONG_COUNT
    cho = index // (JUNGSEONG_COUNT * JONGSEONG_COUNT)

    # Indices are in range by construction; a failure here is a bug, not bad input.
    return Syllable(Choseong(cho), Jungseong(jung), Jongseong(jong))


def compose(syllable: Syllable) -> str:
    """Join components back into a precomposed syllable.

    SBase + (LIndex * VCount + VIndex) * TCount + TIndex
    """
    codepoint = (
        HANGUL_BASE
        + (int(syllable.choseong) * JUNGSEONG_COUNT + int(syllable.jungseong)) * JONGSEONG_COUNT
        + int(syllable.jongseong)
    )
    return chr(codepoint)
