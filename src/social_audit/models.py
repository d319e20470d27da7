"""Data models for social sharing analysis."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


def _freeze(values: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(dict(values or {}))


def _normalize_tags(values: Optional[Mapping[Any, Any]]) -> dict[str, str]:
    """Lowercase keys, blank out falsy values and coerce the rest to str."""
    normalized: dict[str, str] = {}
    for key, value in (values or {}).items():
        if not value:
            value = ""
        normalized[str(key).lower()] = value if isinstance(value, str) else str(value)
    return normalized


# ============================================================================
# Page Metadata Models
# ============================================================================

@dataclass(frozen=True)
class RawMetadata:
    """Meta tag values captured from a rendered page, before any fallback."""

    basic: Mapping[str, str] = field(default_factory=dict)
    facebook: Mapping[str, str] = field(default_factory=dict)
    twitter: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "basic", _freeze(_normalize_tags(self.basic)))
        object.__setattr__(self, "facebook", _freeze(_normalize_tags(self.facebook)))
        object.__setattr__(self, "twitter", _freeze(_normalize_tags(self.twitter)))

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "RawMetadata":
        """Build from the ``{"basic": ..., "facebook": ..., "twitter": ...}`` shape.

        Missing namespaces are treated as empty.
        """
        data = data or {}
        return cls(
            basic=data.get("basic") or {},
            facebook=data.get("facebook") or {},
            twitter=data.get("twitter") or {},
        )


@dataclass(frozen=True)
class ResolvedMetadata:
    """Effective tag values per namespace after fallback resolution."""

    facebook: Mapping[str, str] = field(default_factory=dict)
    twitter: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "facebook", _freeze(self.facebook))
        object.__setattr__(self, "twitter", _freeze(self.twitter))

    @property
    def namespaces(self) -> dict[str, Mapping[str, str]]:
        return {"facebook": self.facebook, "twitter": self.twitter}


# ============================================================================
# Scoring Models
# ============================================================================

class Priority(Enum):
    """Recommendation severity, most urgent first."""

    ESSENTIAL = "ESSENTIAL"
    ISSUE = "ISSUE"
    OPTIMIZATION = "OPTIMIZATION"

    @property
    def rank(self) -> int:
        """0 for the most urgent level."""
        return list(Priority).index(self)


@dataclass(frozen=True)
class Recommendation:
    """A single suggested change tied to one failed or partial check."""

    message: str
    priority: Priority
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "data", _freeze(self.data))

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "data": dict(self.data),
            "priority": self.priority.value,
        }


@dataclass(frozen=True)
class ScoredResult:
    """Outcome of one rule set for one page."""

    test_name: str
    title: str
    description: str
    weight: float
    score: float
    table: tuple[tuple[str, str], ...] = ()
    recommendations: tuple[Recommendation, ...] = ()

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary for result sinks."""
        return {
            "uniqueName": self.test_name,
            "title": self.title,
            "description": self.description,
            "weight": self.weight,
            "score": self.score,
            "table": [list(row) for row in self.table],
            "recommendations": [rec.to_dict() for rec in self.recommendations],
        }
