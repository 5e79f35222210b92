"""Declarative scoring rules.

Each ``Rule`` ties one detector outcome to the points it earns and the
feedback it produces. The engine is driven entirely by ``RULES``: the
aggregator sums contributions per category and the feedback generator walks
the same list in declaration order.

A rule's contribution is ``min(cap, hits * points_per_hit)``. Boolean
detectors report one hit when true.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from sa_ats.scoring.detectors import DetectionFlags

# Regional improvements are only suggested below this SA context score.
REGIONAL_ADVICE_THRESHOLD = 60

MIN_LINE_LENGTH = 30
MAX_LINE_LENGTH = 200


class Category(str, Enum):
    FORMAT = "format"
    CONTENT = "content"
    SA_CONTEXT = "sa_context"


@dataclass(frozen=True)
class Rule:
    """One scoring/feedback rule.

    Attributes:
        key: Stable identifier, used in logs and tests.
        category: Sub-score the points count towards; None for feedback-only rules.
        hits: Counts how often the signal occurs in the detection flags.
        points_per_hit: Points earned per hit.
        cap: Upper bound on the rule's contribution (defaults to one hit).
        strength: Message added to strengths when the rule hits.
        improvement: Message added to improvements when the rule misses.
        regional_advice: Only suggest the improvement while the SA context
            score is below REGIONAL_ADVICE_THRESHOLD.
    """

    key: str
    category: Category | None
    hits: Callable[[DetectionFlags], int]
    points_per_hit: int = 0
    cap: int | None = None
    strength: str | None = None
    improvement: str | None = None
    regional_advice: bool = False

    @property
    def max_points(self) -> int:
        return self.points_per_hit if self.cap is None else self.cap

    def hit_count(self, flags: DetectionFlags) -> int:
        return max(0, int(self.hits(flags)))

    def passed(self, flags: DetectionFlags) -> bool:
        return self.hit_count(flags) > 0

    def contribution(self, flags: DetectionFlags) -> int:
        if self.category is None:
            return 0
        return min(self.max_points, self.hit_count(flags) * self.points_per_hit)


def _line_length_in_range(flags: DetectionFlags) -> int:
    return int(MIN_LINE_LENGTH <= flags.avg_line_length <= MAX_LINE_LENGTH)


RULES: tuple[Rule, ...] = (
    # Format
    Rule(
        key="sections",
        category=Category.FORMAT,
        hits=lambda f: int(f.has_sections),
        points_per_hit=25,
        strength="Well-structured CV with clear sections",
        improvement="Add clear section headings (Education, Experience, Skills, etc.)",
    ),
    Rule(
        key="bullet_points",
        category=Category.FORMAT,
        hits=lambda f: int(f.has_bullet_points),
        points_per_hit=25,
        strength="Effective use of bullet points improves readability",
        improvement="Use bullet points to highlight achievements and responsibilities",
    ),
    Rule(
        key="contact_info",
        category=Category.FORMAT,
        hits=lambda f: int(f.has_contact_info),
        points_per_hit=20,
        strength="Contact details are easy for recruiters to find",
    ),
    Rule(
        key="date_ranges",
        category=Category.FORMAT,
        hits=lambda f: int(f.has_date_ranges),
        points_per_hit=15,
        strength="Clear timeline of work experience",
        improvement="Include clear date ranges for education and work experience",
    ),
    Rule(
        key="dates",
        category=Category.FORMAT,
        hits=lambda f: int(f.has_dates),
        points_per_hit=15,
        strength="Dates are included for roles and qualifications",
    ),
    # Content quality
    Rule(
        key="line_length",
        category=Category.CONTENT,
        hits=_line_length_in_range,
        points_per_hit=25,
        strength="Content is concise without being too terse",
    ),
    Rule(
        key="action_verbs",
        category=Category.CONTENT,
        hits=lambda f: int(f.has_action_verbs),
        points_per_hit=25,
        strength="Uses strong action verbs to highlight achievements",
        improvement="Include strong action verbs to describe achievements",
    ),
    Rule(
        key="quantified_results",
        category=Category.CONTENT,
        hits=lambda f: int(f.has_quantified_results),
        points_per_hit=25,
        strength="Quantifies achievements with specific numbers and percentages",
        improvement="Quantify achievements with specific numbers and percentages",
    ),
    Rule(
        key="key_skills",
        category=Category.CONTENT,
        hits=lambda f: int(f.has_key_skills),
        points_per_hit=25,
        strength="Contains relevant skills that ATS systems look for",
        improvement="Add industry-relevant skills and keywords",
    ),
    # South African context
    Rule(
        key="sa_keywords",
        category=Category.SA_CONTEXT,
        hits=lambda f: len(f.found_sa_keywords),
        points_per_hit=5,
        cap=30,
    ),
    Rule(
        key="certifications",
        category=Category.SA_CONTEXT,
        hits=lambda f: len(f.found_certifications),
        points_per_hit=10,
        cap=20,
        strength="Includes relevant South African certifications/professional bodies",
        improvement="Add relevant South African certifications or professional body memberships",
        regional_advice=True,
    ),
    Rule(
        key="bbbee",
        category=Category.SA_CONTEXT,
        hits=lambda f: len(f.bbbee_terms),
        points_per_hit=20,
        cap=20,
        strength="Includes B-BBEE status, important for South African employers",
        improvement="Consider adding B-BBEE status information if applicable",
        regional_advice=True,
    ),
    Rule(
        key="nqf",
        category=Category.SA_CONTEXT,
        hits=lambda f: f.nqf_mentions,
        points_per_hit=15,
        cap=15,
        strength="Specifies NQF levels for qualifications, aligning with SA standards",
        improvement="Add NQF levels to your qualifications",
        regional_advice=True,
    ),
    Rule(
        key="sa_location",
        category=Category.SA_CONTEXT,
        hits=lambda f: len(f.sa_locations),
        points_per_hit=10,
        cap=10,
        strength="Includes South African location information",
        improvement="Include your location in South Africa",
        regional_advice=True,
    ),
    Rule(
        key="sa_languages",
        category=Category.SA_CONTEXT,
        hits=lambda f: len(f.sa_languages),
        points_per_hit=5,
        cap=5,
        strength="Lists South African languages, valued by local employers",
        improvement="Mention the South African languages you speak",
        regional_advice=True,
    ),
    # Feedback only
    Rule(
        key="sa_market_optimized",
        category=None,
        hits=lambda f: int(len(f.found_sa_keywords) > 3),
        strength="Well-optimized for South African job market",
    ),
    Rule(
        key="concise_paragraphs",
        category=None,
        hits=lambda f: int(not f.has_long_lines),
        improvement="Shorten long paragraphs for better readability",
    ),
)


def rules_for(category: Category) -> tuple[Rule, ...]:
    return tuple(rule for rule in RULES if rule.category is category)


@dataclass(frozen=True)
class FormatCheck:
    """A formatting issue and the suggestion shown when it is present."""

    key: str
    applies: Callable[[DetectionFlags], bool]
    message: str


MAX_CV_CHARS = 5000
MIN_CV_CHARS = 1500

FORMAT_CHECKS: tuple[FormatCheck, ...] = (
    FormatCheck(
        key="long_bullets",
        applies=lambda f: f.avg_line_length > MAX_LINE_LENGTH,
        message="Shorten your bullet points to 1-2 lines each",
    ),
    FormatCheck(
        key="missing_contact_info",
        applies=lambda f: not f.has_contact_info,
        message="Add complete contact information (phone, email, LinkedIn)",
    ),
    FormatCheck(
        key="too_long",
        applies=lambda f: f.char_count > MAX_CV_CHARS,
        message="Consider shortening your CV to 2-3 pages maximum",
    ),
    FormatCheck(
        key="too_short",
        applies=lambda f: f.char_count < MIN_CV_CHARS,
        message="Your CV may be too short - add more relevant details",
    ),
    FormatCheck(
        key="missing_dates",
        applies=lambda f: not f.has_dates,
        message="Add dates to your work experience and education sections",
    ),
)
