from enum import IntEnum


class SurgeryType(IntEnum):
    SYSTEM_ONE = 0
    SYSTEM_TWO = 1
