from dataclasses import dataclass, field
from typing import List


@dataclass
class ValidationResult:
    passed_validation: bool = True
    errors: List[str] = field(default_factory=list)

    @classmethod
    def failed(cls, *errors: str) -> "ValidationResult":
        return cls(passed_validation=False, errors=list(errors))

    def add_errors(self, *errors: str) -> None:
        self.passed_validation = False
        self.errors.extend(errors)
