class PartshopError(Exception):
    """Base class for all domain errors raised inside partshop."""


class StoreUnreachable(PartshopError):
    """Any failure talking to the item store: transport error or non-2xx status."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Item store unreachable during {operation}: {reason}")


class AuthenticationFailed(PartshopError):
    """Wrong username/password pair on the login gate."""


class AssistantUnavailable(PartshopError):
    """The AI description service could not produce a suggestion."""
