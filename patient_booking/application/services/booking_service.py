import uuid
import logging
from dataclasses import dataclass
from typing import Optional

from ..errors import BookingValidationError
from ..ports.booking_repo import BookingRepository
from ..ports.clock import SystemClock
from ..validation import ValidationResult
from .booking_validator import BookingRequestValidator
from ...schemas.bookings.booking import AddBookingRequest, BookingView

logger = logging.getLogger(__name__)


@dataclass
class BookingService:
    repo: BookingRepository
    validator: BookingRequestValidator
    clock: SystemClock

    def add_booking(self, request: AddBookingRequest) -> None:
        self._raise_if_failed(self.validator.validate_add_booking(request), "add booking")

        surgery_type = self.repo.get_patient_surgery_type(request.patient_id)
        order = self.repo.add_order(
            start_time=request.start_time,
            end_time=request.end_time,
            patient_id=request.patient_id,
            doctor_id=request.doctor_id,
            surgery_type=surgery_type,
        )
        logger.info(f"Booking {order.id} added for patient {order.patient_id} with doctor {order.doctor_id}")

    def delete_booking(self, booking_id: uuid.UUID) -> None:
        self._raise_if_failed(self.validator.validate_booking_id(booking_id), "delete booking")

        self.repo.mark_deleted(booking_id)
        logger.info(f"Booking {booking_id} marked as deleted")

    def get_next_booking(self, patient_id: int) -> Optional[BookingView]:
        self._raise_if_failed(self.validator.validate_patient_id(patient_id), "get next booking")

        order = self.repo.next_order_for_patient(patient_id, after=self.clock.utc_now())
        if not order:
            return None
        return BookingView.model_validate(order)

    def _raise_if_failed(self, result: ValidationResult, action: str) -> None:
        if result.passed_validation:
            return
        error = BookingValidationError.from_result(result)
        logger.warning(f"Rejected {action} request: {error}")
        raise error
