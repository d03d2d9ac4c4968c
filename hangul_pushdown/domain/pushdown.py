from __future__ import annotations

"""Jongseong pushdown engine (domain layer).

Rewrites text so that a final consonant followed by a silent ㅇ initial moves
into that initial slot, the way the words are actually pronounced:

    국어 -> 구거, 닭이 -> 달기

Single left-to-right pass with one character of lookahead. The only carried
state is the pending choseong produced by a matched rule, which is applied
to the next Hangul syllable. Non-Hangul characters are copied verbatim and
do not consume the pending choseong.
"""

from typing import Iterator, Optional

from hangul_pushdown.domain.enums import Choseong
from hangul_pushdown.domain.hangul_unicode import compose, decompose, is_hangul_syllable
from hangul_pushdown.domain.pushdown_rules import find_rule, is_palatalizing


def iter_pushdown(text: str, extended: bool = False) -> Iterator[str]:
    """Yield the transformed text one character at a time.

    Output has exactly one character per input character.
    """
    pending: Optional[Choseong] = None
    last = len(text) - 1

    for i, char in enumerate(text):
        if not is_hangul_syllable(char):
            yield char
            continue

        current = decompose(char)
        if pending is not None:
            current = current.replace(choseong=pending)
            pending = None

        nxt = text[i + 1] if i < last else None
        if nxt is None or not is_hangul_syllable(nxt):
            yield compose(current)
            continue

        following = decompose(nxt)

        if extended or not is_palatalizing(current.jongseong, following.jungseong):
            rule = find_rule(current.jongseong, extended)
            if rule is not None and following.choseong == Choseong.Ieung:
                current = current.replace(jongseong=rule.remaining)
                pending = rule.next_choseong

        yield compose(current)


def pushdown_jongseong_config(text: str, extended: bool) -> str:
    """Return `text` with jongseong pushdown applied.

    Args:
        text: any string; only Hangul syllables are rewritten.
        extended: also apply the phonetically loose rows (ㄶ, ㅀ, ㅎ) and
            drop the ㄷ/ㅌ palatalization exception.
    """
    return "".join(iter_pushdown(text, extended))


def pushdown_jongseong(text: str) -> str:
    """Conservative pushdown; same as pushdown_jongseong_config(text, False)."""
    return pushdown_jongseong_config(text, False)
