"""Social meta tag analyzer for Open Graph and Twitter Cards."""

import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple

from social_audit.config import AnalysisThresholds, default_thresholds
from social_audit.constants import (
    BASE_SCORE,
    FACEBOOK_NAMESPACE,
    FACEBOOK_SHARING_GUIDE_URL,
    FACEBOOK_TEST_DESCRIPTION,
    FACEBOOK_TEST_TITLE,
    FACEBOOK_WEIGHT,
    SECURE_PLAYER_URL_PATTERN,
    TWITTER_CARDS_GUIDE_URL,
    TWITTER_NAMESPACE,
    TWITTER_PLAYER_CARD,
    TWITTER_PLAYER_CARD_URL,
    TWITTER_TEST_DESCRIPTION,
    TWITTER_TEST_TITLE,
    TWITTER_WEIGHT,
    VALID_TWITTER_CARDS,
)
from social_audit.models import (
    Priority,
    RawMetadata,
    Recommendation,
    ResolvedMetadata,
    ScoredResult,
)
from social_audit.resolver import DisplayTable, generate_tables, meta, resolve_metadata

logger = logging.getLogger(__name__)


def text_length(value: str) -> int:
    """Length in UTF-16 code units, as browsers count it.

    Characters outside the Basic Multilingual Plane (most emoji) count as 2.
    """
    return len(value.encode("utf-16-le")) // 2


class SocialMetaAnalyzer:
    """Scores a page's Open Graph and Twitter Card tags.

    Both rule sets start from a score of 1.0 and subtract a deduction for
    each failed check. Checks on the same tag are exclusive: only the first
    matching condition fires.
    """

    def __init__(self, thresholds: Optional[AnalysisThresholds] = None):
        """Initialize analyzer with configurable settings.

        Args:
            thresholds: Analysis thresholds configuration
        """
        self.thresholds = thresholds or default_thresholds
        self._player_url_pattern = re.compile(SECURE_PLAYER_URL_PATTERN)

    def analyze(self, raw: RawMetadata) -> Tuple[ScoredResult, ScoredResult]:
        """Resolve fallbacks and run both rule sets on one page.

        Args:
            raw: Tag values captured from the page

        Returns:
            Tuple of (facebook_result, twitter_result)
        """
        return self.evaluate(resolve_metadata(raw))

    def evaluate(self, resolved: ResolvedMetadata) -> Tuple[ScoredResult, ScoredResult]:
        """Run both rule sets on already-resolved metadata.

        Returns:
            Tuple of (facebook_result, twitter_result)
        """
        tables = generate_tables(resolved)
        return (
            self.check_facebook(resolved, tables[FACEBOOK_NAMESPACE]),
            self.check_twitter(resolved, tables[TWITTER_NAMESPACE]),
        )

    def check_facebook(
        self,
        resolved: ResolvedMetadata,
        table: Optional[DisplayTable] = None,
    ) -> ScoredResult:
        """Score the Open Graph tags Facebook uses for link previews."""
        t = self.thresholds
        deductions: List[float] = []
        recommendations: List[Recommendation] = []

        def fail(deduction: float, message: str, priority: Priority) -> None:
            deductions.append(deduction)
            recommendations.append(Recommendation(message=message, priority=priority))

        title = meta(resolved, "og:title")
        if not title:
            fail(t.deduction_major,
                 "Add an `og:title` meta tag to your page.",
                 Priority.ESSENTIAL)
        elif text_length(title) > t.og_title_max:
            fail(t.deduction_minor,
                 f"Reduce the length of your `og:title` to {t.og_title_max} characters "
                 "or under for better cross-platform visibility.",
                 Priority.OPTIMIZATION)

        description = meta(resolved, "og:description")
        if not description:
            fail(t.deduction_major,
                 "Add a meta description to your page.",
                 Priority.ESSENTIAL)
        elif text_length(description) > t.og_description_max:
            fail(t.deduction_minor,
                 f"Reduce the length of your `og:description` to {t.og_description_max} "
                 f"characters or under. A length of {t.og_description_recommended} "
                 "characters or under is recommended for better cross-platform visibility.",
                 Priority.OPTIMIZATION)
        elif text_length(description) > t.og_description_recommended:
            fail(t.deduction_consider,
                 f"Consider reducing the length of your `og:description` to "
                 f"{t.og_description_recommended} characters or under for better "
                 "cross-platform visibility.",
                 Priority.OPTIMIZATION)

        if not meta(resolved, "og:image"):
            fail(t.deduction_major,
                 "Add an `og:image` meta tag to your page. For more information, visit "
                 f"[Facebook's Guide to Sharing for Webmasters]({FACEBOOK_SHARING_GUIDE_URL})",
                 Priority.ESSENTIAL)

        return self._build_result(
            test_name=FACEBOOK_NAMESPACE,
            title=FACEBOOK_TEST_TITLE,
            description=FACEBOOK_TEST_DESCRIPTION,
            weight=FACEBOOK_WEIGHT,
            deductions=deductions,
            recommendations=recommendations,
            table=table if table is not None else generate_tables(resolved)[FACEBOOK_NAMESPACE],
        )

    def check_twitter(
        self,
        resolved: ResolvedMetadata,
        table: Optional[DisplayTable] = None,
    ) -> ScoredResult:
        """Score the Twitter Card tags, including the player card URL."""
        t = self.thresholds
        deductions: List[float] = []
        recommendations: List[Recommendation] = []

        def fail(deduction: float, message: str, priority: Priority) -> None:
            deductions.append(deduction)
            recommendations.append(Recommendation(message=message, priority=priority))

        card = meta(resolved, "twitter:card")
        if card not in VALID_TWITTER_CARDS:
            fail(t.deduction_crucial,
                 "Add a valid `twitter:card` meta tag to your page. For more information, "
                 f"visit [Twitter's Getting Started with Cards Guide]({TWITTER_CARDS_GUIDE_URL})",
                 Priority.ESSENTIAL)

        title = meta(resolved, "twitter:title")
        if not title:
            fail(t.deduction_major,
                 "Add a `twitter:title` meta tag to your page.",
                 Priority.OPTIMIZATION)
        elif text_length(title) > t.twitter_title_max:
            fail(t.deduction_minor,
                 f"Reduce the length of your `twitter:title` to {t.twitter_title_max} "
                 "characters or under.",
                 Priority.OPTIMIZATION)

        description = meta(resolved, "twitter:description")
        if not description:
            fail(t.deduction_major,
                 "Add a meta description to your page.",
                 Priority.OPTIMIZATION)
        elif text_length(description) > t.twitter_description_max:
            fail(t.deduction_minor,
                 f"Reduce the length of your `twitter:description` to "
                 f"{t.twitter_description_max} characters or under.",
                 Priority.OPTIMIZATION)

        if not meta(resolved, "twitter:image"):
            fail(t.deduction_major,
                 "Add a `twitter:image` meta tag to your page. For more information, visit "
                 f"[Facebook's Guide to Sharing for Webmasters]({FACEBOOK_SHARING_GUIDE_URL})",
                 Priority.OPTIMIZATION)

        if card == TWITTER_PLAYER_CARD and not self.is_valid_player_url(
            meta(resolved, "twitter:player")
        ):
            fail(t.deduction_crucial,
                 "Add a valid `twitter:player` meta tag to your page. It is mandatory when "
                 "using the player card. For more information, visit "
                 f"[Twitter's Player Card Documentation]({TWITTER_PLAYER_CARD_URL})",
                 Priority.ISSUE)

        return self._build_result(
            test_name=TWITTER_NAMESPACE,
            title=TWITTER_TEST_TITLE,
            description=TWITTER_TEST_DESCRIPTION,
            weight=TWITTER_WEIGHT,
            deductions=deductions,
            recommendations=recommendations,
            table=table if table is not None else generate_tables(resolved)[TWITTER_NAMESPACE],
        )

    def is_valid_player_url(self, url: str) -> bool:
        """True for non-empty ``https://`` or protocol-relative URLs."""
        return bool(url) and self._player_url_pattern.match(url) is not None

    @staticmethod
    def _build_result(
        test_name: str,
        title: str,
        description: str,
        weight: float,
        deductions: Sequence[float],
        recommendations: Sequence[Recommendation],
        table: DisplayTable,
    ) -> ScoredResult:
        score = max(0.0, BASE_SCORE - sum(deductions))
        logger.debug(
            f"{test_name}: score={score} with {len(recommendations)} recommendation(s)"
        )
        return ScoredResult(
            test_name=test_name,
            title=title,
            description=description,
            weight=weight,
            score=score,
            table=tuple(table),
            recommendations=tuple(recommendations),
        )


def evaluate_metadata(
    raw: RawMetadata,
    thresholds: Optional[AnalysisThresholds] = None,
) -> Tuple[ScoredResult, ScoredResult]:
    """Score one page's raw metadata with the default rule sets.

    Returns:
        Tuple of (facebook_result, twitter_result)
    """
    return SocialMetaAnalyzer(thresholds).analyze(raw)


def weighted_score(results: Sequence[ScoredResult]) -> float:
    """Combine results into a page-level score using their weights."""
    return sum(result.weight * result.score for result in results)


def priority_counts(results: Sequence[ScoredResult]) -> Dict[str, int]:
    """Count recommendations per priority across results, most urgent first."""
    counts = {priority.value: 0 for priority in Priority}
    for result in results:
        for rec in result.recommendations:
            counts[rec.priority.value] += 1
    return counts
