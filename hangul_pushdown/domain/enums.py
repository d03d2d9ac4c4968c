from __future__ import annotations

"""Closed phonetic enumerations for modern Hangul syllables.

Ordinals are pinned to the Unicode Hangul Syllables arithmetic:
the value of each member is exactly the index used in

    0xAC00 + (choseong * 21 + jungseong) * 28 + jongseong

Do not reorder members without updating their values.
"""

from enum import IntEnum


class _JamoEnum(IntEnum):
    """IntEnum whose members map to a Hangul Compatibility Jamo glyph."""

    @property
    def glyph(self) -> str:
        return self._glyphs()[self.value]

    @classmethod
    def _glyphs(cls) -> tuple[str, ...]:
        raise NotImplementedError

    @classmethod
    def from_glyph(cls, glyph: str):
        try:
            return cls(cls._glyphs().index(str(glyph)))
        except ValueError:
            raise ValueError("Invalid %s jamo: %r" % (cls.__name__, glyph)) from None


class Choseong(_JamoEnum):
    """Initial consonants."""

    Kiyeok = 0
    SsangKiyeok = 1
    Nieun = 2
    Tikeut = 3
    SsangTikeut = 4
    Rieul = 5
    Mieum = 6
    Pieup = 7
    SsangPieup = 8
    Sios = 9
    SsangSios = 10
    # silent placeholder; the liaison target
    Ieung = 11
    Cieuc = 12
    SsangCieuc = 13
    Chieuch = 14
    Khieukh = 15
    Thieuth = 16
    Phieuph = 17
    Hieuh = 18

    @classmethod
    def _glyphs(cls) -> tuple[str, ...]:
        return _CHOSEONG_GLYPHS


class Jungseong(_JamoEnum):
    """Medial vowels."""

    A = 0
    Ae = 1
    Ya = 2
    Yae = 3
    Eo = 4
    E = 5
    Yeo = 6
    Ye = 7
    O = 8
    Wa = 9
    Wae = 10
    Oe = 11
    Yo = 12
    U = 13
    Weo = 14
    We = 15
    Wi = 16
    Yu = 17
    Eu = 18
    Yi = 19
    I = 20

    @classmethod
    def _glyphs(cls) -> tuple[str, ...]:
        return _JUNGSEONG_GLYPHS


class Jongseong(_JamoEnum):
    """Final consonants, including clusters. `Empty` means no final."""

    Empty = 0
    Kiyeok = 1
    SsangKiyeok = 2
    KiyeokSios = 3
    Nieun = 4
    NieunCieuc = 5
    NieunHieuh = 6
    Tikeut = 7
    Rieul = 8
    RieulKiyeok = 9
    RieulMieum = 10
    RieulPieup = 11
    RieulSios = 12
    RieulThieuth = 13
    RieulPhieuph = 14
    RieulHieuh = 15
    Mieum = 16
    Pieup = 17
    PieupSios = 18
    Sios = 19
    SsangSios = 20
    Ieung = 21
    Cieuc = 22
    Chieuch = 23
    Khieukh = 24
    Thieuth = 25
    Phieuph = 26
    Hieuh = 27

    @classmethod
    def _glyphs(cls) -> tuple[str, ...]:
        return _JONGSEONG_GLYPHS


# -----------------------------------------------------------------------------
# Compatibility jamo, in Unicode order
# -----------------------------------------------------------------------------

_CHOSEONG_GLYPHS: tuple[str, ...] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

_JUNGSEONG_GLYPHS: tuple[str, ...] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Index 0 is "no final"
_JONGSEONG_GLYPHS: tuple[str, ...] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)
