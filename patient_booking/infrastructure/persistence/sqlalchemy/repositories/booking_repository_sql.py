import uuid
from datetime import datetime
from typing import List, Optional
from sqlmodel import Session, select

from .....db.models import Clinic, Doctor, Order, Patient
from .....application.ports.booking_repo import BookingRepository, OrderDto
from .....utils.time import ensure_utc


class SqlBookingRepository(BookingRepository):
    def __init__(self, session: Session):
        self.session = session

    def _order_to_dto(self, o: Order) -> OrderDto:
        return OrderDto(
            id=o.id,
            start_time=ensure_utc(o.start_time),
            end_time=ensure_utc(o.end_time),
            patient_id=o.patient_id,
            doctor_id=o.doctor_id,
            surgery_type=o.surgery_type,
            is_deleted=o.is_deleted,
        )

    def patient_exists(self, patient_id: int) -> bool:
        return self.session.exec(select(Patient.id).where(Patient.id == patient_id)).first() is not None

    def doctor_exists(self, doctor_id: int) -> bool:
        return self.session.exec(select(Doctor.id).where(Doctor.id == doctor_id)).first() is not None

    def booking_exists(self, booking_id: uuid.UUID) -> bool:
        return self.session.exec(select(Order.id).where(Order.id == booking_id)).first() is not None

    def list_doctor_orders(self, doctor_id: int) -> List[OrderDto]:
        rows = self.session.exec(select(Order).where(Order.doctor_id == doctor_id)).all()
        return [self._order_to_dto(r) for r in rows]

    def get_patient_surgery_type(self, patient_id: int) -> int:
        return self.session.exec(
            select(Clinic.surgery_type)
            .join(Patient, Patient.clinic_id == Clinic.id)
            .where(Patient.id == patient_id)
        ).one()

    def add_order(self, start_time: datetime, end_time: datetime, patient_id: int, doctor_id: int, surgery_type: int) -> OrderDto:
        order = Order(
            start_time=start_time,
            end_time=end_time,
            patient_id=patient_id,
            doctor_id=doctor_id,
            surgery_type=surgery_type,
            is_deleted=False,
        )
        self.session.add(order)
        self.session.commit()
        self.session.refresh(order)
        return self._order_to_dto(order)

    def mark_deleted(self, booking_id: uuid.UUID) -> None:
        o = self.session.exec(select(Order).where(Order.id == booking_id)).one()
        o.is_deleted = True
        self.session.add(o)
        self.session.commit()

    def next_order_for_patient(self, patient_id: int, after: datetime) -> Optional[OrderDto]:
        o = self.session.exec(
            select(Order)
            .where(Order.patient_id == patient_id)
            .where(Order.is_deleted == False)  # noqa: E712
            .where(Order.start_time > after)
            .order_by(Order.start_time)
        ).first()
        return self._order_to_dto(o) if o else None
