"""
Hangul syllable codec and jongseong pushdown (liaison).

Stable import surface for library callers.
"""

from .domain.enums import Choseong, Jongseong, Jungseong  # noqa: F401
from .domain.hangul_unicode import (  # noqa: F401
    NotHangulSyllableError,
    Syllable,
    compose,
    decompose,
    is_hangul_syllable,
)
from .domain.pushdown import (  # noqa: F401
    iter_pushdown,
    pushdown_jongseong,
    pushdown_jongseong_config,
)
from .domain.pushdown_rules import RULESET, PushdownRule  # noqa: F401

__all__ = [
    "Choseong",
    "Jongseong",
    "Jungseong",
    "NotHangulSyllableError",
    "PushdownRule",
    "RULESET",
    "Syllable",
    "compose",
    "decompose",
    "is_hangul_syllable",
    "iter_pushdown",
    "pushdown_jongseong",
    "pushdown_jongseong_config",
]
