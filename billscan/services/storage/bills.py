"""
In-memory bill storage.
Contents are lost on restart.
"""
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, Optional
import uuid

from .bill_store_base import BillStoreBase


class InMemoryBillStore(BillStoreBase):
    def __init__(self):
        self._bills: Dict[str, dict] = {}
        self._lock = Lock()

    def create_bill(self, bill_data: dict) -> str:
        bill_id = str(uuid.uuid4())
        entry = {
            "id": bill_id,
            "bill": dict(bill_data),
            "saved_at": datetime.now(timezone.utc).isoformat(),
        }
        with self._lock:
            self._bills[bill_id] = entry
        return bill_id

    def get_bill(self, bill_id: str) -> Optional[dict]:
        return self._bills.get(bill_id)

    def list_all(self) -> list:
        with self._lock:
            return list(self._bills.values())

    def clear(self) -> None:
        """Drop every saved bill (used by tests)"""
        with self._lock:
            self._bills.clear()


# Global instance (in production, use dependency injection)
bill_store = InMemoryBillStore()
