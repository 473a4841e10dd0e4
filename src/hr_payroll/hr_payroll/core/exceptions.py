class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a looked-up employee or branch does not exist."""


class SalaryNotConfiguredError(DomainError):
    """Raised when an employee has no usable salary fields configured."""

    def __init__(self, employee_id: int):
        super().__init__(f"No salary configured for employee {employee_id}")
        self.employee_id = employee_id
