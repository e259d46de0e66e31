"""Utilities module initialization"""

from nexmo_rest.utils.logger import (
    ClientLogger,
    redact_pairs,
    redact_sensitive_data,
)

__all__ = ["ClientLogger", "redact_pairs", "redact_sensitive_data"]
