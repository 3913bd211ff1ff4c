# backend/utils/storage.py
import logging
from typing import Optional
from sqlalchemy.orm import Session

from config import settings
from models.storage_slot import StorageSlot

logger = logging.getLogger(__name__)


class SlotStorage:
    """Durable key-value slots backed by the storage_slots table.

    Every write commits before returning, so a read that follows a
    mutation always sees it.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_item(self, key: str) -> Optional[str]:
        slot = self.db.get(StorageSlot, key)
        return slot.value if slot else None

    def set_item(self, key: str, value: str) -> None:
        slot = self.db.get(StorageSlot, key)
        if slot:
            slot.value = value
        else:
            self.db.add(StorageSlot(key=key, value=value))
        self.db.commit()

    def remove_item(self, key: str) -> None:
        slot = self.db.get(StorageSlot, key)
        if slot:
            self.db.delete(slot)
            self.db.commit()


class TokenStore:
    # Opaque bearer token kept in a single slot; absence means logged out
    def __init__(self, storage: SlotStorage, key: str = settings.TOKEN_STORAGE_KEY):
        self.storage = storage
        self.key = key

    def get(self) -> Optional[str]:
        return self.storage.get_item(self.key) or None

    def set(self, token: str) -> None:
        self.storage.set_item(self.key, token)

    def clear(self) -> None:
        self.storage.remove_item(self.key)
        logger.info("Auth token cleared")
