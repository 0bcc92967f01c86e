from .base import RfcUriError
from .parser import UriParsingError
from .uri import DomainError
from .uri import InvalidFormat

__all__ = ["RfcUriError", "InvalidFormat", "DomainError", "UriParsingError"]
