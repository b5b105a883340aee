"""
Base configuration abstractions for the front desk dashboard.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from frontdesk.adapters.base import FrontDeskAdapter


DEFAULT_NIGHTLY_RATE = 800.0


class FrontDeskConfig(ABC):
    """Abstract configuration contract for a hotel deployment."""

    @abstractmethod
    def get_database_url(self) -> str:
        """Return database URL used by the storage adapter."""

    @abstractmethod
    def create_adapter(self) -> FrontDeskAdapter:
        """
        Create and return the storage adapter for this hotel.
        Concrete configs decide which adapter (SQLite, hosted document store, ...)
        and with which connection parameters.
        Returns:
            FrontDeskAdapter: Initialized adapter instance
        """

    def get_nightly_rate(self) -> float:
        """Room price per night used for balance calculations. Default: 800"""
        return DEFAULT_NIGHTLY_RATE

    def get_hotel_display_name(self) -> str:
        """Human friendly hotel label for UI surfaces."""
        return "Front Desk"

    def get_strict_validation(self) -> bool:
        """
        When True, broken booking records raise DataIntegrityError instead of
        being skipped with a warning. Meant for development.
        """
        return False

    def seed_database(self, adapter: FrontDeskAdapter) -> None:
        """Optional hook for deployment specific seed logic."""
        return None
