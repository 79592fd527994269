# patient_booking/db/models/clinic.py
from typing import Optional, List, TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship

from .enums import SurgeryType

if TYPE_CHECKING:
    from .patient import Patient

class Clinic(SQLModel, table=True):
    __tablename__ = "clinics"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    # Stored as the integer code of SurgeryType
    surgery_type: int = Field(default=int(SurgeryType.SYSTEM_ONE))

    # Relationships
    patients: List["Patient"] = Relationship(back_populates="clinic")
