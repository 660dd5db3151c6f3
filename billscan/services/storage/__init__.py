from .bill_store_base import BillStoreBase
from .bills import InMemoryBillStore, bill_store

__all__ = ["BillStoreBase", "InMemoryBillStore", "bill_store"]
