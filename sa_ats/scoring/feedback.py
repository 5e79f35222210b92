"""Builds strengths, improvements and formatting suggestions from the rules.

Lists are assembled in rule declaration order and shuffled before they are
returned so repeated analyses do not always lead with the same messages.
Scores never depend on the order.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from sa_ats.scoring.detectors import DetectionFlags
from sa_ats.scoring.rules import FORMAT_CHECKS, REGIONAL_ADVICE_THRESHOLD, RULES, FormatCheck, Rule

MIN_FEEDBACK_ITEMS = 3

FILLER_STRENGTHS = (
    "Your CV has been successfully processed.",
    "Your CV demonstrates professional experience.",
    "Your CV is in a plain-text friendly format that ATS systems can read.",
)

FILLER_IMPROVEMENTS = (
    "Tailor your CV to match specific job descriptions.",
    "Consider adding more South African context to your CV.",
    "Ask a mentor or recruiter to review your CV before applying.",
)


@dataclass(frozen=True)
class Feedback:
    strengths: tuple[str, ...]
    improvements: tuple[str, ...]
    format_feedback: tuple[str, ...]


def shuffled(items: Iterable[str], rng: random.Random | None = None) -> tuple[str, ...]:
    """Return a shuffled copy of ``items`` (Fisher-Yates via ``Random.shuffle``)."""
    result = list(items)
    (rng or random).shuffle(result)
    return tuple(result)


def pad_with_filler(
    messages: Sequence[str], filler: Sequence[str], minimum: int = MIN_FEEDBACK_ITEMS
) -> list[str]:
    """Top up ``messages`` from ``filler`` until it holds ``minimum`` entries."""
    padded = list(messages)
    for message in filler:
        if len(padded) >= minimum:
            break
        if message not in padded:
            padded.append(message)
    return padded


def collect_strengths(flags: DetectionFlags, rules: Sequence[Rule] = RULES) -> list[str]:
    return [rule.strength for rule in rules if rule.strength and rule.passed(flags)]


def collect_improvements(
    flags: DetectionFlags, sa_context_score: int, rules: Sequence[Rule] = RULES
) -> list[str]:
    improvements = []
    for rule in rules:
        if not rule.improvement or rule.passed(flags):
            continue
        if rule.regional_advice and sa_context_score >= REGIONAL_ADVICE_THRESHOLD:
            continue
        improvements.append(rule.improvement)
    return improvements


def collect_format_feedback(
    flags: DetectionFlags, checks: Sequence[FormatCheck] = FORMAT_CHECKS
) -> list[str]:
    return [check.message for check in checks if check.applies(flags)]


def build_feedback(
    flags: DetectionFlags, sa_context_score: int, rng: random.Random | None = None
) -> Feedback:
    strengths = pad_with_filler(collect_strengths(flags), FILLER_STRENGTHS)
    improvements = pad_with_filler(collect_improvements(flags, sa_context_score), FILLER_IMPROVEMENTS)
    return Feedback(
        strengths=shuffled(strengths, rng),
        improvements=shuffled(improvements, rng),
        format_feedback=shuffled(collect_format_feedback(flags), rng),
    )
