# patient_booking/db/models/order.py
import uuid
from typing import Optional, TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime

if TYPE_CHECKING:
    from .doctor import Doctor
    from .patient import Patient

class Order(SQLModel, table=True):
    """A booking between a patient and a doctor. Never physically deleted."""
    __tablename__ = "orders"
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    start_time: datetime = Field(index=True)
    end_time: datetime
    patient_id: int = Field(foreign_key="patients.id", index=True)
    doctor_id: int = Field(foreign_key="doctors.id", index=True)
    surgery_type: int
    is_deleted: bool = Field(default=False)

    # Relationships
    patient: Optional["Patient"] = Relationship(back_populates="orders")
    doctor: Optional["Doctor"] = Relationship(back_populates="orders")
