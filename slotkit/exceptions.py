"""Central exception hierarchy for slotkit.

This module defines the base application exception ``AppError`` and the
specialized subclasses raised by the slot engine. Every failure is raised
synchronously at the point of violation and propagates to the component or
template author; nothing is retried. Using a centralized hierarchy makes
error handling and testing consistent.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping


class AppError(Exception):
    """Base exception for all slotkit errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'UNKNOWN_SLOT_ERROR'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging.
    transient : bool, optional
        Whether the error is temporary and may be retried.

    Attributes
    ----------
    code : str
        Stable machine-readable error code.
    message : str
        Human-readable message.
    context : dict
        Structured, non-sensitive context for logging.
    transient : bool
        True if the error is transient.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'k': 'v'})
    >>> e.code
    'CODE'
    """

    __slots__ = ("code", "message", "context", "transient")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class ConfigurationError(AppError):
    """Raised for invalid or missing configuration."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "CONFIGURATION_ERROR", message, context=context, transient=False
        )


class SlotError(AppError):
    """Base class for errors raised by slot declaration and access."""

    error_code = "SLOT_ERROR"

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            type(self).error_code, message, context=context, transient=False
        )


class SlotDeclarationError(SlotError):
    """Raised when a slot declaration is malformed."""

    error_code = "SLOT_DECLARATION_ERROR"


class DuplicateSlotError(SlotDeclarationError):
    """Raised when a slot name or accessor is declared twice on one type."""

    error_code = "DUPLICATE_SLOT_ERROR"


class ReservedNameError(SlotDeclarationError):
    """Raised when a slot would be named after a reserved word."""

    error_code = "RESERVED_NAME_ERROR"


class UnknownSlotError(SlotError):
    """Raised when reading or writing a slot the type never declared.

    The message lists the registered slot names to aid debugging.
    """

    error_code = "UNKNOWN_SLOT_ERROR"

    def __init__(self, slot_name: str, registered: Iterable[str]) -> None:
        names = list(registered)
        super().__init__(
            f"Unknown slot '{slot_name}' - expected one of {names}",
            context={"slot": slot_name, "registered_slots": names},
        )


class ConflictingContentError(SlotError):
    """Raised when a write supplies both ``content=`` and a deferred block."""

    error_code = "CONFLICTING_CONTENT_ERROR"


class InvalidContentClassError(SlotError):
    """Raised when a slot's content class lacks the slot-content capability."""

    error_code = "INVALID_CONTENT_CLASS_ERROR"
