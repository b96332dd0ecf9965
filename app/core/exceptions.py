"""Domain-level exception hierarchy for service and repository layers."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for domain-specific failures."""


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""


class ConflictError(DomainError):
    """Raised when a state conflict occurs (e.g. duplicate entries)."""


class ValidationError(DomainError):
    """Raised when input validation fails at the domain/service layer."""


class InfrastructureError(DomainError):
    """Raised when infrastructure (DB or external service) is unavailable."""


class AuthenticationError(DomainError):
    """Raised when credentials are missing or do not match an account."""


class LoginRequiredError(AuthenticationError):
    """Raised when an action needs a signed-in identity.

    Carries where the client should go to sign in and the location to
    return to once it has.
    """

    def __init__(
        self,
        message: str = "login required",
        *,
        return_to: str,
        redirect_to: str = "/login",
    ) -> None:
        super().__init__(message)
        self.return_to = return_to
        self.redirect_to = redirect_to


class BookingStateError(ConflictError):
    """Raised when a booking flow is driven through an invalid transition."""


class PaymentError(ConflictError):
    """Raised when a processed payment fails verification."""
