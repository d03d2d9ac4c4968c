from __future__ import annotations

"""Hangul composition helpers over compatibility jamo (domain layer).

Thin glyph-level wrappers around the codec in `hangul_unicode`, for callers
that work with jamo strings ("ㄱ", "ㅏ", "ㄴ") rather than enum members.

Primary API:
- compose_lvt(lead, vowel, tail)
- compose_cv(lead, vowel)
- decompose_to_jamo(char)
"""

from hangul_pushdown.domain.enums import Choseong, Jongseong, Jungseong
from hangul_pushdown.domain.hangul_unicode import Syllable, compose, decompose


def compose_lvt(lead: str, vowel: str, tail: str = "") -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간") or "" if inputs are invalid.
    """
    l = (lead or "").strip()
    v = (vowel or "").strip()
    t = (tail or "").strip()

    if not l or not v:
        return ""

    try:
        syllable = Syllable(
            Choseong.from_glyph(l),
            Jungseong.from_glyph(v),
            Jongseong.from_glyph(t),
        )
    except ValueError:
        return ""

    return compose(syllable)


def compose_cv(lead: str, vowel: str) -> str:
    """Compose a Hangul syllable from a leading consonant and a vowel."""
    return compose_lvt(lead, vowel, "")


def decompose_to_jamo(char: str) -> tuple[str, str, str]:
    """Return (choseong, jungseong, jongseong) compatibility jamo for a syllable.

    The jongseong slot is "" when the syllable has no final consonant.
    Raises NotHangulSyllableError for anything outside the syllable block.
    """
    return decompose(char).to_jamo()
