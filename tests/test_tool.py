# tests/test_tool.py
"""Tests for the page-level social sharing tool."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, patch

import pytest

from social_audit.browser import BrowserNotStartedError, BrowserSession
from social_audit.extractor import EXTRACT_METAS_SCRIPT, extract_raw_metadata
from social_audit.models import RawMetadata
from social_audit.social_analyzer import evaluate_metadata
from social_audit.tool import SocialSharingTool, audit_url


PAGE_METAS = {
    "basic": {"title": "Test Social Page", "description": "A test page."},
    "facebook": {
        "og:title": "My Awesome Page",
        "og:image": "https://example.com/image.jpg",
    },
    "twitter": {"twitter:card": "summary"},
}


@pytest.fixture
def page():
    """Fake rendered page returning fixed meta tags."""
    page = AsyncMock()
    page.evaluate.return_value = PAGE_METAS
    return page


class TestExtractRawMetadata:
    """Tests for extract_raw_metadata."""

    @pytest.mark.asyncio
    async def test_runs_extraction_script(self, page):
        """Test the DOM script is evaluated once on the page."""
        raw = await extract_raw_metadata(page)

        page.evaluate.assert_awaited_once_with(EXTRACT_METAS_SCRIPT)
        assert raw.basic["title"] == "Test Social Page"
        assert raw.facebook["og:title"] == "My Awesome Page"

    def test_script_reads_expected_selectors(self):
        """Test the script queries title, description and both prefixes."""
        assert 'querySelector("title")' in EXTRACT_METAS_SCRIPT
        assert 'meta[property^=\\"og:\\"]' in EXTRACT_METAS_SCRIPT
        assert 'meta[name^=\\"twitter:\\"]' in EXTRACT_METAS_SCRIPT
        assert "toLowerCase()" in EXTRACT_METAS_SCRIPT


class TestSocialSharingTool:
    """Tests for SocialSharingTool."""

    @pytest.mark.asyncio
    async def test_run_scores_both_networks(self, page):
        """Test run produces Facebook then Twitter results."""
        tool = SocialSharingTool(page)
        facebook, twitter = await tool.run()

        assert facebook.test_name == "facebook"
        assert facebook.score == 1.0
        assert twitter.test_name == "twitter"
        assert twitter.score == 1.0
        assert tool.resolved.twitter["twitter:title"] == "My Awesome Page"

    @pytest.mark.asyncio
    async def test_run_matches_pure_evaluation(self, page):
        """Test the tool scores exactly like evaluate_metadata on the same tags."""
        tool = SocialSharingTool(page)
        scored = await tool.run()

        assert scored == evaluate_metadata(RawMetadata.from_mapping(PAGE_METAS))

    @pytest.mark.asyncio
    async def test_results_in_sink_format(self, page):
        """Test results are plain dictionaries in run order."""
        tool = SocialSharingTool(page)
        await tool.run()

        results = tool.results
        assert [r["uniqueName"] for r in results] == ["facebook", "twitter"]
        assert results[0]["table"][0] == ["Meta tag", "Value found on your page"]
        assert all(r["weight"] == 0.5 for r in results)

    @pytest.mark.asyncio
    async def test_results_empty_before_run(self, page):
        """Test nothing is reported until the tool runs."""
        tool = SocialSharingTool(page)
        assert tool.results == []

    @pytest.mark.asyncio
    async def test_extraction_error_propagates(self, page):
        """Test a failing page produces an error and no results."""
        page.evaluate.side_effect = RuntimeError("Execution context was destroyed")
        tool = SocialSharingTool(page)

        with pytest.raises(RuntimeError, match="Execution context"):
            await tool.run()

        assert tool.results == []

    @pytest.mark.asyncio
    async def test_cleanup_is_safe(self, page):
        """Test cleanup can be awaited without a prior run."""
        tool = SocialSharingTool(page)
        await tool.cleanup()


class FakeSession:
    """Stand-in for BrowserSession that serves a fixed page."""

    def __init__(self, config=None):
        self.config = config
        self.opened = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    @asynccontextmanager
    async def page(self, url):
        self.opened.append(url)
        fake = AsyncMock()
        fake.evaluate.return_value = PAGE_METAS
        yield fake


class TestAuditUrl:
    """Tests for audit_url."""

    @pytest.mark.asyncio
    async def test_audit_url(self):
        """Test a URL is rendered and scored."""
        with patch("social_audit.tool.BrowserSession", FakeSession):
            facebook, twitter = await audit_url("https://example.com")

        assert facebook.score == 1.0
        assert twitter.score == 1.0


class TestBrowserSession:
    """Tests for BrowserSession."""

    @pytest.mark.asyncio
    async def test_page_requires_started_session(self):
        """Test requesting a page before launching raises."""
        session = BrowserSession()

        with pytest.raises(BrowserNotStartedError, match="not running"):
            async with session.page("https://example.com"):
                pass

    def test_has_async_context_manager(self):
        """Test BrowserSession supports the async context manager protocol."""
        import inspect
        session = BrowserSession()
        assert inspect.iscoroutinefunction(session.__aenter__)
        assert inspect.iscoroutinefunction(session.__aexit__)

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_audit_real_page(self):
        """Test auditing a live page end to end."""
        facebook, twitter = await audit_url("https://example.com")
        assert 0.0 <= facebook.score <= 1.0
        assert 0.0 <= twitter.score <= 1.0
