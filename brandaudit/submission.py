"""Audit submission form data and validation."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

# Field name -> message shown when it is blank.
REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "Name is required."),
    ("email", "Email is required."),
    ("company", "Company name is required."),
    ("address", "Address is required."),
    ("phone", "Phone number is required."),
    ("website", "Website URL is required."),
)


class SubmissionError(ValueError):
    """Raised when a submission is missing required fields."""

    def __init__(self, errors: list[str]):
        super().__init__(" ".join(errors))
        self.errors = errors


@dataclass(frozen=True, slots=True)
class Submission:
    """Identity fields entered by the person requesting an audit."""

    name: str
    email: str
    company: str
    address: str
    phone: str
    website: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Submission":
        if not isinstance(data, dict):
            raise ValueError("submission must be an object")
        return cls(**{key: str(data.get(key) or "").strip() for key, _ in REQUIRED_FIELDS})

    def validate(self) -> list[str]:
        """Return one message per blank required field, in form order."""
        return [message for key, message in REQUIRED_FIELDS if not getattr(self, key).strip()]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
