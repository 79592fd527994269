# patient_booking/schemas/bookings/booking.py
import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict, field_validator

from ...db.models.enums import SurgeryType
from ...utils.time import ensure_utc


class AddBookingRequest(BaseModel):
    patient_id: int
    doctor_id: int
    start_time: datetime
    end_time: datetime

    @field_validator("start_time", "end_time")
    @classmethod
    def _normalize_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class BookingView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    start_time: datetime
    end_time: datetime
    patient_id: int
    doctor_id: int
    surgery_type: SurgeryType
