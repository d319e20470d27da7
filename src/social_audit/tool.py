"""Social sharing audit for a single rendered page."""

import logging
from typing import List, Optional, Tuple

from social_audit.browser import BrowserSession
from social_audit.browser_config import BrowserConfig
from social_audit.config import AnalysisThresholds
from social_audit.extractor import extract_raw_metadata
from social_audit.models import RawMetadata, ResolvedMetadata, ScoredResult
from social_audit.resolver import resolve_metadata
from social_audit.social_analyzer import SocialMetaAnalyzer

logger = logging.getLogger(__name__)


class SocialSharingTool:
    """Checks how a page will look when shared on Facebook and Twitter.

    A tool instance audits exactly one page; create a new one per page.

        tool = SocialSharingTool(page)
        await tool.run()
        tool.results  # [facebook_dict, twitter_dict]
    """

    def __init__(self, page, thresholds: Optional[AnalysisThresholds] = None):
        """Initialize the tool.

        Args:
            page: Rendered page exposing ``async evaluate(script)``
            thresholds: Optional rule thresholds
        """
        self.page = page
        self.analyzer = SocialMetaAnalyzer(thresholds)
        self.raw: Optional[RawMetadata] = None
        self.resolved: Optional[ResolvedMetadata] = None
        self.scored: Tuple[ScoredResult, ...] = ()

    async def run(self) -> Tuple[ScoredResult, ...]:
        """Extract the page's tags and score both networks.

        Extraction errors propagate; nothing is scored in that case.
        """
        logger.info("Running social sharing audit")
        self.raw = await extract_raw_metadata(self.page)

        self.resolved = resolve_metadata(self.raw)
        self.scored = self.analyzer.evaluate(self.resolved)

        logger.info(
            "Social sharing audit complete: "
            + ", ".join(f"{r.test_name}={r.score}" for r in self.scored)
        )
        return self.scored

    @property
    def results(self) -> List[dict]:
        """Scored results in sink format, Facebook first."""
        return [result.to_dict() for result in self.scored]

    async def cleanup(self) -> None:
        """Release resources; the page belongs to the caller."""


async def audit_url(
    url: str,
    config: Optional[BrowserConfig] = None,
    thresholds: Optional[AnalysisThresholds] = None,
) -> Tuple[ScoredResult, ...]:
    """Render ``url`` in a browser and run the social sharing audit on it.

    Args:
        url: Page to audit
        config: Browser settings
        thresholds: Optional rule thresholds

    Returns:
        Tuple of (facebook_result, twitter_result)
    """
    async with BrowserSession(config) as session:
        async with session.page(url) as page:
            tool = SocialSharingTool(page, thresholds)
            try:
                return await tool.run()
            finally:
                await tool.cleanup()
