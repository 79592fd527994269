import uuid
from dataclasses import dataclass
from typing import List, Optional, Protocol
from datetime import datetime


@dataclass
class OrderDto:
    id: uuid.UUID
    start_time: datetime
    end_time: datetime
    patient_id: int
    doctor_id: int
    surgery_type: int
    is_deleted: bool = False


class BookingRepository(Protocol):
    def patient_exists(self, patient_id: int) -> bool:
        ...

    def doctor_exists(self, doctor_id: int) -> bool:
        ...

    def booking_exists(self, booking_id: uuid.UUID) -> bool:
        ...

    def list_doctor_orders(self, doctor_id: int) -> List[OrderDto]:
        """Every order attached to the doctor, soft-deleted ones included."""
        ...

    def get_patient_surgery_type(self, patient_id: int) -> int:
        ...

    def add_order(self, start_time: datetime, end_time: datetime, patient_id: int, doctor_id: int, surgery_type: int) -> OrderDto:
        ...

    def mark_deleted(self, booking_id: uuid.UUID) -> None:
        ...

    def next_order_for_patient(self, patient_id: int, after: datetime) -> Optional[OrderDto]:
        """Earliest non-deleted order of the patient starting strictly after `after`."""
        ...
