"""Unified converter exception taxonomy.

Provides a shared base exception hierarchy for every conversion stage.
Each domain exception inherits from ``ConversionError`` and carries
structured context fields so the CLI can report failures consistently.

Taxonomy categories
-------------------
- ``ValidationError``: the input data is wrong (bad XML, bad number, bad config).
- ``PermanentError``: the environment is wrong (unreadable input, unwritable output).

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all conversion-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Conversion stage where the error occurred
            (e.g. ``"parse_facility"``, ``"write_video_maps"``).
        code: Machine-readable error code (e.g. ``"FACILITY_PARSE_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(ConversionError):
    """Input data could not be interpreted."""


class PermanentError(ConversionError):
    """Unrecoverable I/O failure."""
