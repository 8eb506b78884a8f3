"""Error taxonomy shared by the services and the HTTP layer."""


class MeetingMailError(Exception):
    """Base error carrying a client-facing message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(MeetingMailError):
    """Malformed or missing request input."""

    status_code = 400


class ConfigurationError(MeetingMailError):
    """Credentials for an external service are not configured."""


class UpstreamError(MeetingMailError):
    """The completion provider failed or returned unusable content."""


class DeliveryError(MeetingMailError):
    """The mail transport rejected the message."""
