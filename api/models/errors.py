"""
Domain errors raised while building and storing trailers.

All of them are client-input problems: retrying with the same input
reproduces the same failure.
"""

from typing import Optional, Union

Number = Union[int, float]


class TrailerDomainError(ValueError):
    """Base class for trailer domain errors."""


class TrailerValidationError(TrailerDomainError):
    """A single field failed validation."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class InvalidVinError(TrailerValidationError):
    """The supplied VIN is malformed."""

    def __init__(self, message: str):
        super().__init__("vin", message)


class SpecificationOutOfRangeError(TrailerValidationError):
    """A physical specification is outside its allowed bounds."""

    def __init__(self, field: str, minimum: Number, maximum: Number, message: Optional[str] = None):
        super().__init__(field, message or f"{field} must be between {minimum} and {maximum}")
        self.minimum = minimum
        self.maximum = maximum


class BusinessRuleViolation(TrailerDomainError):
    """A cross-field business rule rejected the trailer."""


class TrailerAlreadyExistsError(TrailerDomainError):
    """A trailer with the same unit number or VIN is already stored."""

    def __init__(self, field: str, value: str):
        label = "ID" if field == "trailer_id" else "VIN"
        super().__init__(f"Trailer with {label} {value} already exists")
        self.field = field
        self.value = value


class TrailerNotFoundError(TrailerDomainError):
    """No trailer matches the requested identifier."""

    def __init__(self, identifier: str):
        super().__init__(f"Trailer with ID {identifier} not found")
        self.identifier = identifier


class InvalidPaginationError(TrailerDomainError):
    """Page or limit outside the accepted range."""
