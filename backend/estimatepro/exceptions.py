"""Custom exception hierarchy for the EstimatePro pricing engine."""

from __future__ import annotations


class EstimateProError(Exception):
    """Base exception for all EstimatePro errors."""


class ValidationError(EstimateProError, ValueError):
    """Raised when calculation input violates a pricing precondition.

    ``field`` names the offending input (snake_case) so callers can attach
    the message to the matching form control.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class UnknownServiceError(EstimateProError, KeyError):
    """Raised when a service code has no registered calculator."""

    def __init__(self, service_code: object) -> None:
        self.service_code = service_code
        super().__init__(service_code)

    def __str__(self) -> str:
        return f"Unknown service type '{self.service_code}'"


class RateTableError(EstimateProError):
    """Raised when a rate table cannot be built or loaded."""
