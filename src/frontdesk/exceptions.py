"""Custom exceptions for the front desk dashboard."""
from __future__ import annotations


class FrontDeskError(Exception):
    """Base exception for all front desk errors."""
    pass


class ConfigurationError(FrontDeskError):
    """Raised when configuration is invalid or missing."""
    pass


class DatabaseError(FrontDeskError):
    """Raised when database operations fail."""
    pass


class AdapterError(FrontDeskError):
    """Raised when the storage adapter cannot serve a request."""
    pass


class BookingError(FrontDeskError):
    """Raised when booking-specific domain errors occur."""
    pass


class PaymentError(FrontDeskError):
    """Raised when a payment cannot be recorded or a payment rule blocks an action."""
    pass


class DataIntegrityError(FrontDeskError):
    """Raised when stored records break an invariant (e.g. check-out before check-in)."""
    pass
