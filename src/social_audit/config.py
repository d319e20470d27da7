from dotenv import load_dotenv
from dataclasses import dataclass
from typing import Optional
import os

from social_audit.constants import (
    SCORE_DEDUCTION_CRUCIAL,
    SCORE_DEDUCTION_MAJOR,
    SCORE_DEDUCTION_MINOR,
    SCORE_DEDUCTION_CONSIDER,
    OG_TITLE_MAX_LENGTH,
    OG_DESCRIPTION_RECOMMENDED_LENGTH,
    OG_DESCRIPTION_MAX_LENGTH,
    TWITTER_TITLE_MAX_LENGTH,
    TWITTER_DESCRIPTION_MAX_LENGTH,
)

load_dotenv()  # Loads variables from .env file


@dataclass
class Config:
    """Configuration for the social sharing audit."""
    user_agent: Optional[str] = None
    browser_type: str = "chromium"
    timeout: int = 30000  # milliseconds
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            user_agent=os.getenv("USER_AGENT"),
            browser_type=os.getenv("BROWSER_TYPE", "chromium"),
            timeout=int(os.getenv("PAGE_TIMEOUT_MS", "30000")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE"),
        )


@dataclass(frozen=True)
class AnalysisThresholds:
    """Thresholds used by the Facebook and Twitter rule sets."""

    # Open Graph lengths (characters)
    og_title_max: int = OG_TITLE_MAX_LENGTH
    og_description_recommended: int = OG_DESCRIPTION_RECOMMENDED_LENGTH
    og_description_max: int = OG_DESCRIPTION_MAX_LENGTH

    # Twitter Card lengths (characters)
    twitter_title_max: int = TWITTER_TITLE_MAX_LENGTH
    twitter_description_max: int = TWITTER_DESCRIPTION_MAX_LENGTH

    # Score deductions
    deduction_crucial: float = SCORE_DEDUCTION_CRUCIAL
    deduction_major: float = SCORE_DEDUCTION_MAJOR
    deduction_minor: float = SCORE_DEDUCTION_MINOR
    deduction_consider: float = SCORE_DEDUCTION_CONSIDER  # advisory only


# Default thresholds instance
default_thresholds = AnalysisThresholds()
