"""Domain-specific exceptions"""

from typing import Sequence


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidApplicantError(DomainException):
    """Applicant payload cannot be turned into a profile"""

    pass


class MissingFieldsError(InvalidApplicantError):
    """Mandatory applicant fields are absent"""

    def __init__(self, missing_fields: Sequence[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")
