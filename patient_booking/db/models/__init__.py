# Models package (re-export feature modules for stable imports)
from .enums import SurgeryType
from .clinic import Clinic
from .patient import Patient
from .doctor import Doctor
from .order import Order

__all__ = [
    "SurgeryType",
    "Clinic",
    "Patient",
    "Doctor",
    "Order",
]
