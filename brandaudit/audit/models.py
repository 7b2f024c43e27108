"""Models for audit results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from brandaudit.search.models import SearchResult

ControlType = Literal["FullControl", "PartialControl", "NoControl", "MissedOpportunity"]

CONTROL_TYPES: tuple[ControlType, ...] = (
    "FullControl",
    "PartialControl",
    "NoControl",
    "MissedOpportunity",
)

CONTROL_LABELS: dict[ControlType, str] = {
    "FullControl": "Full Control",
    "PartialControl": "Partial Control",
    "NoControl": "No Control",
    "MissedOpportunity": "Missed Opportunities",
}


@dataclass(frozen=True, slots=True)
class ClassifiedResult:
    """Search result tagged with how much the business controls it."""

    title: str
    link: str
    snippet: str
    control_type: ControlType

    @classmethod
    def from_result(cls, result: SearchResult, control_type: ControlType) -> "ClassifiedResult":
        return cls(
            title=result.title,
            link=result.link,
            snippet=result.snippet,
            control_type=control_type,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "link": self.link,
            "snippet": self.snippet,
            "controlType": self.control_type,
        }


@dataclass(frozen=True, slots=True)
class QuerySpec:
    """One search issued during an audit."""

    label: str
    query: str


@dataclass(frozen=True, slots=True)
class AuditSection:
    """Classified results and their breakdown for one query."""

    label: str
    query: str
    results: tuple[ClassifiedResult, ...] = ()
    counts: dict[ControlType, int] = field(default_factory=dict)
    percentages: dict[ControlType, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.results)

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "query": self.query,
            "results": [r.to_dict() for r in self.results],
            "counts": dict(self.counts),
            "percentages": dict(self.percentages),
        }


@dataclass(frozen=True, slots=True)
class AuditReport:
    """Ordered sections of one audit run."""

    business_name: str
    official_site: str
    sections: tuple[AuditSection, ...] = ()

    def __iter__(self):
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def to_dict(self) -> dict[str, Any]:
        return {
            "businessName": self.business_name,
            "officialSite": self.official_site,
            "sections": [s.to_dict() for s in self.sections],
        }
