from typing import Any

from .base import RfcUriError


class InvalidFormat(RfcUriError, ValueError):
    """
    A URI component does not match its grammar.

    The offending component name and the raw value are kept on the
    exception so callers can report which part of their input was rejected.
    """

    def __init__(self, component: str, value: Any, reason: str = ""):
        self.component = component
        self.value = value
        text = f"Invalid {component}: {value!r}"
        if reason:
            text = f"{text} ({reason})"
        super(InvalidFormat, self).__init__(text)


class DomainError(RfcUriError):
    ...
