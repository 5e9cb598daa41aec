"""Custom exceptions for Newsroom."""


class NewsroomError(Exception):
    """Base exception for all Newsroom errors."""

    def __init__(self, message: str, *args: object) -> None:
        self.message = message
        super().__init__(message, *args)


# Usage errors
class UsageError(NewsroomError):
    """Component was used in a way its lifecycle does not allow."""


class CriterionNotSetError(UsageError):
    """Selection was attempted before a criterion was configured."""


class InvalidCreditError(NewsroomError, ValueError):
    """A journalist was credited with a negative amount."""


# Transport errors
class TransportError(NewsroomError):
    """Base error for outbound notification transports."""


class MailTransportError(TransportError):
    """Failed to deliver a mail message."""


class DashboardTransportError(TransportError):
    """Failed to deliver a dashboard payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


# Publication errors
class NotificationError(NewsroomError):
    """An observer failed while a publication batch was being confirmed."""

    def __init__(self, message: str, observer: str, batch_size: int) -> None:
        self.observer = observer
        self.batch_size = batch_size
        super().__init__(message)
