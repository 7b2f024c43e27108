"""Utility functions for brandaudit."""

from brandaudit.utils.redaction import SecretRedactor

__all__ = ["SecretRedactor"]
