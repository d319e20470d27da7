# src/social_audit/constants.py
"""Centralized constants for the social sharing analyzer.

This module contains the fixed values shared by the resolver and the rule
sets. For user-configurable thresholds, see config.py and AnalysisThresholds.
"""

# =============================================================================
# Namespace Constants
# =============================================================================

FACEBOOK_NAMESPACE = "facebook"
TWITTER_NAMESPACE = "twitter"

# Tag prefix that routes a lookup to the Facebook namespace
OPEN_GRAPH_PREFIX = "og:"

# Header row prepended to every display table
TABLE_HEADER = ("Meta tag", "Value found on your page")


# =============================================================================
# Scoring Constants
# =============================================================================

BASE_SCORE = 1.0

# Each namespace counts for half of the page score
FACEBOOK_WEIGHT = 0.5
TWITTER_WEIGHT = 0.5

SCORE_DEDUCTION_CRUCIAL = 1.0
SCORE_DEDUCTION_MAJOR = 0.5
SCORE_DEDUCTION_MINOR = 0.25
SCORE_DEDUCTION_CONSIDER = 0.0


# =============================================================================
# Facebook / Open Graph Constants
# =============================================================================

OG_TITLE_MAX_LENGTH = 55
OG_DESCRIPTION_RECOMMENDED_LENGTH = 55
OG_DESCRIPTION_MAX_LENGTH = 200

FACEBOOK_TEST_TITLE = "Facebook sharing optimization"
FACEBOOK_TEST_DESCRIPTION = (
    "Checks if your pages have all of the essential meta tags to look good "
    "when it is shared on Facebook."
)

FACEBOOK_SHARING_GUIDE_URL = "https://developers.facebook.com/docs/sharing/webmasters/"


# =============================================================================
# Twitter Card Constants
# =============================================================================

VALID_TWITTER_CARDS = frozenset({"summary", "summary_large_image", "app", "player"})

TWITTER_PLAYER_CARD = "player"

TWITTER_TITLE_MAX_LENGTH = 70
TWITTER_DESCRIPTION_MAX_LENGTH = 200

# twitter:player must be https:// or protocol-relative
SECURE_PLAYER_URL_PATTERN = r"^(?:https://|//)"

TWITTER_TEST_TITLE = "Twitter sharing optimization"
TWITTER_TEST_DESCRIPTION = (
    "Checks if your pages have all of the essential meta tags to look good "
    "when it is shared on Twitter."
)

TWITTER_CARDS_GUIDE_URL = (
    "https://developer.twitter.com/en/docs/tweets/optimize-with-cards/guides/getting-started"
)
TWITTER_PLAYER_CARD_URL = (
    "https://developer.twitter.com/en/docs/tweets/optimize-with-cards/overview/player-card"
)
