# backend/models/storage_slot.py
from sqlalchemy import Column, String, Text, DateTime, func
from database import Base

# Represents one named key-value slot (cart payload, auth token)
class StorageSlot(Base):
    __tablename__ = "storage_slots"

    key = Column(String(100), primary_key=True, index=True) # Slot name
    value = Column(Text, nullable=False) # Raw stored payload
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now()) # Last write timestamp
