"""
DNSEndpoint validation errors
"""

from typing import Sequence


class ValidationError(ValueError):
    """Base class for DNSEndpoint validation failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def wrap(self, prefix: str) -> "ValidationError":
        """Prepend a context prefix to the message, keeping the error kind."""
        self.message = f"{prefix}: {self.message}"
        self.args = (self.message,)
        return self

    def __str__(self) -> str:
        return self.message


class EmptySpecError(ValidationError):
    """The DNSEndpoint spec has no endpoints."""

    def __init__(self):
        super().__init__("endpoints not provided")


class UnsupportedRecordTypeError(ValidationError):
    """An endpoint uses a record type outside the supported set."""

    def __init__(self, value: str, supported: Sequence[str]):
        self.value = value
        self.supported = tuple(supported)
        super().__init__(
            f'RecordType: Unsupported value: "{value}": '
            f"Supported values: {', '.join(self.supported)}"
        )


class InvalidTargetError(ValidationError):
    """An endpoint target is not an IP address literal."""

    def __init__(self, target: str):
        self.target = target
        super().__init__("must be a valid IP address, (e.g. 10.9.8.7 or 2001:db8::ffff)")
