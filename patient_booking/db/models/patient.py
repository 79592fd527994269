# patient_booking/db/models/patient.py
from typing import Optional, List, TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime

if TYPE_CHECKING:
    from .clinic import Clinic
    from .order import Order

class Patient(SQLModel, table=True):
    __tablename__ = "patients"
    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str
    last_name: str
    email: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    clinic_id: int = Field(foreign_key="clinics.id")

    # Relationships
    clinic: Optional["Clinic"] = Relationship(back_populates="patients")
    orders: List["Order"] = Relationship(back_populates="patient")
