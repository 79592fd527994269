from .bookings.booking import AddBookingRequest, BookingView

__all__ = [
    "AddBookingRequest",
    "BookingView",
]
