"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidObligationDataError(DomainException):
    """Payment item record is malformed and cannot become an obligation"""

    pass


class InvalidRescheduleTargetError(DomainException):
    """Target year/month for an overdue reschedule is not a real month"""

    pass
