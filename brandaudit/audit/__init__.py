"""Brand control audit core."""

from brandaudit.audit.aggregate import aggregate
from brandaudit.audit.classifier import PARTIAL_CONTROL_SITES, classify
from brandaudit.audit.domain import normalize_domain
from brandaudit.audit.models import (
    CONTROL_LABELS,
    CONTROL_TYPES,
    AuditReport,
    AuditSection,
    ClassifiedResult,
    ControlType,
    QuerySpec,
)
from brandaudit.audit.runner import AuditError, AuditRunner, build_queries

__all__ = [
    "AuditError",
    "AuditReport",
    "AuditRunner",
    "AuditSection",
    "CONTROL_LABELS",
    "CONTROL_TYPES",
    "ClassifiedResult",
    "ControlType",
    "PARTIAL_CONTROL_SITES",
    "QuerySpec",
    "aggregate",
    "build_queries",
    "classify",
    "normalize_domain",
]
