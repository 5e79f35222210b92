"""Turns detector results into sub-scores and the weighted overall score."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sa_ats.scoring.detectors import DetectionFlags
from sa_ats.scoring.profiles import WeightProfile
from sa_ats.scoring.rules import RULES, Category, Rule


@dataclass(frozen=True)
class ScoreBreakdown:
    format_score: int
    content_score: int
    sa_context_score: int
    overall_score: int


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round (halves up) and clamp a score into [0, 100]."""
    return max(0, min(100, round_half_up(value)))


def category_score(
    flags: DetectionFlags, category: Category, rules: tuple[Rule, ...] = RULES
) -> int:
    return clamp_score(sum(rule.contribution(flags) for rule in rules if rule.category is category))


def overall_score(
    format_score: int, content_score: int, sa_context_score: int, profile: WeightProfile
) -> int:
    return clamp_score(
        format_score * profile.format_weight
        + content_score * profile.content_weight
        + sa_context_score * profile.sa_context_weight
    )


def aggregate(
    flags: DetectionFlags, profile: WeightProfile, rules: tuple[Rule, ...] = RULES
) -> ScoreBreakdown:
    fmt = category_score(flags, Category.FORMAT, rules)
    content = category_score(flags, Category.CONTENT, rules)
    sa = category_score(flags, Category.SA_CONTEXT, rules)
    return ScoreBreakdown(
        format_score=fmt,
        content_score=content,
        sa_context_score=sa,
        overall_score=overall_score(fmt, content, sa, profile),
    )
