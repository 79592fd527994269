import uuid
from dataclasses import dataclass
from datetime import datetime

from ..ports.booking_repo import BookingRepository
from ..ports.clock import SystemClock
from ..validation import ValidationResult
from ...schemas.bookings.booking import AddBookingRequest

PATIENT_NOT_FOUND = "A patient with that ID could not be found"
DOCTOR_NOT_FOUND = "A doctor with that ID could not be found"
BOOKING_NOT_FOUND = "A booking with that ID could not be found"
BOOKING_IN_PAST = "An appointment cannot be booked in the past"
END_BEFORE_START = "An appointment end time must be after the start time"
DOCTOR_NOT_AVAILABLE = "The requested appointment time with this doctor is not available"


@dataclass
class BookingRequestValidator:
    """Read-only rule checks for booking requests.

    Rule groups run in order and the first failing group's errors are
    returned on their own.
    """

    repo: BookingRepository
    clock: SystemClock

    def validate_add_booking(self, request: AddBookingRequest) -> ValidationResult:
        result = ValidationResult()

        if self._patient_not_found(request.patient_id, result):
            return result

        if self._doctor_not_found(request.doctor_id, result):
            return result

        if self._invalid_booking_time(request, self.clock.utc_now(), result):
            return result

        if self._doctor_not_available(request, result):
            return result

        return result

    def validate_patient_id(self, patient_id: int) -> ValidationResult:
        result = ValidationResult()
        self._patient_not_found(patient_id, result)
        return result

    def validate_booking_id(self, booking_id: uuid.UUID) -> ValidationResult:
        result = ValidationResult()
        if not self.repo.booking_exists(booking_id):
            result.add_errors(BOOKING_NOT_FOUND)
        return result

    def _patient_not_found(self, patient_id: int, result: ValidationResult) -> bool:
        if not self.repo.patient_exists(patient_id):
            result.add_errors(PATIENT_NOT_FOUND)
            return True
        return False

    def _doctor_not_found(self, doctor_id: int, result: ValidationResult) -> bool:
        if not self.repo.doctor_exists(doctor_id):
            result.add_errors(DOCTOR_NOT_FOUND)
            return True
        return False

    def _invalid_booking_time(self, request: AddBookingRequest, now: datetime, result: ValidationResult) -> bool:
        # Both checks run; their errors are reported together
        errors = []
        if request.start_time < now:
            errors.append(BOOKING_IN_PAST)
        if request.start_time >= request.end_time:
            errors.append(END_BEFORE_START)

        if errors:
            result.add_errors(*errors)
            return True
        return False

    def _doctor_not_available(self, request: AddBookingRequest, result: ValidationResult) -> bool:
        # Bounds are inclusive and soft-deleted orders still block the slot
        orders = self.repo.list_doctor_orders(request.doctor_id)
        if any(request.start_time <= o.end_time and request.end_time >= o.start_time for o in orders):
            result.add_errors(DOCTOR_NOT_AVAILABLE)
            return True
        return False
