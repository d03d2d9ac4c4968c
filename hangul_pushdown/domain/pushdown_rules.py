from __future__ import annotations

"""Jongseong pushdown (liaison) rule table.

This module is the single source of truth for:
  - RULESET, the ordered (match -> remaining + next choseong) rows
  - the palatalization exception data

How to read a row:
  when the current syllable ends in `match` and the next syllable starts with
  the silent ㅇ, the current final becomes `remaining` and the next initial
  becomes `next_choseong`. Rows flagged `extended` are common in casual
  writing but are not phonetically equivalent (e.g. ㅎ is usually silent in
  좋아), so they only apply when the extended ruleset is on.

Finals with no row (Empty, ㅇ) are never pushed down.
"""

from dataclasses import dataclass
from typing import Final, Optional

from hangul_pushdown.domain.enums import Choseong, Jongseong, Jungseong


@dataclass(frozen=True)
class PushdownRule:
    match: Jongseong
    remaining: Jongseong
    next_choseong: Choseong
    extended: bool = False

    def applies(self, final: Jongseong, extended: bool) -> bool:
        return self.match == final and (extended or not self.extended)


def _rule(
    match: Jongseong,
    remaining: Jongseong,
    next_choseong: Choseong,
    extended: bool = False,
) -> PushdownRule:
    return PushdownRule(match, remaining, next_choseong, extended)


_EMPTY = Jongseong.Empty

RULESET: Final[tuple[PushdownRule, ...]] = (
    _rule(Jongseong.Kiyeok, _EMPTY, Choseong.Kiyeok),
    _rule(Jongseong.SsangKiyeok, _EMPTY, Choseong.SsangKiyeok),
    _rule(Jongseong.KiyeokSios, Jongseong.Kiyeok, Choseong.Sios),
    _rule(Jongseong.Nieun, _EMPTY, Choseong.Nieun),
    _rule(Jongseong.NieunCieuc, Jongseong.Nieun, Choseong.Cieuc),
    _rule(Jongseong.NieunHieuh, Jongseong.Nieun, Choseong.Hieuh, extended=True),
    _rule(Jongseong.Tikeut, _EMPTY, Choseong.Tikeut),
    _rule(Jongseong.Rieul, _EMPTY, Choseong.Rieul),
    _rule(Jongseong.RieulKiyeok, Jongseong.Rieul, Choseong.Kiyeok),
    _rule(Jongseong.RieulMieum, Jongseong.Rieul, Choseong.Mieum),
    _rule(Jongseong.RieulPieup, Jongseong.Rieul, Choseong.Pieup),
    _rule(Jongseong.RieulSios, Jongseong.Rieul, Choseong.Sios),
    _rule(Jongseong.RieulThieuth, Jongseong.Rieul, Choseong.Thieuth),
    _rule(Jongseong.RieulPhieuph, Jongseong.Rieul, Choseong.Phieuph),
    _rule(Jongseong.RieulHieuh, Jongseong.Rieul, Choseong.Hieuh, extended=True),
    _rule(Jongseong.Mieum, _EMPTY, Choseong.Mieum),
    _rule(Jongseong.Pieup, _EMPTY, Choseong.Pieup),
    _rule(Jongseong.PieupSios, Jongseong.Pieup, Choseong.Sios),
    _rule(Jongseong.Sios, _EMPTY, Choseong.Sios),
    _rule(Jongseong.SsangSios, _EMPTY, Choseong.SsangSios),
    _rule(Jongseong.Cieuc, _EMPTY, Choseong.Cieuc),
    _rule(Jongseong.Chieuch, _EMPTY, Choseong.Chieuch),
    _rule(Jongseong.Khieukh, _EMPTY, Choseong.Khieukh),
    _rule(Jongseong.Thieuth, _EMPTY, Choseong.Thieuth),
    _rule(Jongseong.Phieuph, _EMPTY, Choseong.Phieuph),
    _rule(Jongseong.Hieuh, _EMPTY, Choseong.Hieuh, extended=True),
)


# -----------------------------------------------------------------------------
# Palatalization exception
# -----------------------------------------------------------------------------
#
# ㄷ/ㅌ before ㅣ or a y-glide palatalize (굳이 is read 구지, 같이 is read 가치),
# so a plain shift would misspell the sound. Outside the extended ruleset the
# whole table is skipped for these pairs.

PALATALIZING_FINALS: Final[frozenset[Jongseong]] = frozenset({
    Jongseong.Tikeut,
    Jongseong.Thieuth,
})

PALATALIZING_VOWELS: Final[frozenset[Jungseong]] = frozenset({
    Jungseong.Ya,
    Jungseong.Yae,
    Jungseong.Yeo,
    Jungseong.Ye,
    Jungseong.Yo,
    Jungseong.Yu,
    Jungseong.I,
})


def is_palatalizing(final: Jongseong, next_vowel: Jungseong) -> bool:
    return final in PALATALIZING_FINALS and next_vowel in PALATALIZING_VOWELS


def find_rule(final: Jongseong, extended: bool) -> Optional[PushdownRule]:
    """Return the first row matching `final` under the given ruleset, or None."""
    for rule in RULESET:
        if rule.applies(final, extended):
            return rule
    return None
