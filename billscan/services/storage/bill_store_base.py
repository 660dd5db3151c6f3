"""
Abstract base class for saved-bill storage.

Bills reach storage only after passing the save rules; the store itself does
no validation.
"""

from abc import ABC, abstractmethod
from typing import Optional


class BillStoreBase(ABC):
    """
    Interface the API depends on for persisting confirmed bills.

    The in-memory implementation serves development and tests; a database
    backed store can be swapped in behind the same methods.
    """

    @abstractmethod
    def create_bill(self, bill_data: dict) -> str:
        """
        Persist a confirmed bill and return its ID.

        Args:
            bill_data: Dictionary with vendor, amount, date, category, description

        Returns:
            Bill ID (unique identifier)
        """
        pass

    @abstractmethod
    def get_bill(self, bill_id: str) -> Optional[dict]:
        """
        Get a saved bill by ID.

        Returns:
            Dictionary with keys id, bill, saved_at; None if not found.
        """
        pass

    @abstractmethod
    def list_all(self) -> list:
        """List all saved bills in insertion order."""
        pass
