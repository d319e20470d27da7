"""Social sharing audit for Open Graph and Twitter Card meta tags."""

__version__ = "0.1.0"

from social_audit.models import (
    RawMetadata,
    ResolvedMetadata,
    Priority,
    Recommendation,
    ScoredResult,
)
from social_audit.resolver import (
    FALLBACK_CHAIN,
    resolve_metadata,
    meta,
    generate_tables,
)
from social_audit.social_analyzer import (
    SocialMetaAnalyzer,
    evaluate_metadata,
    weighted_score,
    priority_counts,
)
from social_audit.extractor import extract_raw_metadata
from social_audit.tool import SocialSharingTool, audit_url
from social_audit.browser import BrowserSession, BrowserNotStartedError
from social_audit.browser_config import BrowserConfig
from social_audit.config import Config, AnalysisThresholds, default_thresholds

__all__ = [
    # Models
    "RawMetadata",
    "ResolvedMetadata",
    "Priority",
    "Recommendation",
    "ScoredResult",
    # Resolution
    "FALLBACK_CHAIN",
    "resolve_metadata",
    "meta",
    "generate_tables",
    # Scoring
    "SocialMetaAnalyzer",
    "evaluate_metadata",
    "weighted_score",
    "priority_counts",
    # Page audit
    "extract_raw_metadata",
    "SocialSharingTool",
    "audit_url",
    "BrowserSession",
    "BrowserNotStartedError",
    "BrowserConfig",
    # Config
    "Config",
    "AnalysisThresholds",
    "default_thresholds",
]
