# patient_booking/db/models/doctor.py
from typing import Optional, List, TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime

from ...utils.time import utc_now

if TYPE_CHECKING:
    from .order import Order

class Doctor(SQLModel, table=True):
    __tablename__ = "doctors"
    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str
    last_name: str
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)

    # Relationships
    orders: List["Order"] = Relationship(back_populates="doctor")
