from .models import Clinic, Patient, Doctor, Order, SurgeryType

__all__ = ["Clinic", "Patient", "Doctor", "Order", "SurgeryType"]
