__version__ = "0.1.0"

from .encoding import ComponentKind
from .encoding import decode_percent
from .encoding import encode
from .errors import DomainError
from .errors import InvalidFormat
from .errors import RfcUriError
from .errors import UriParsingError
from .host import Absent
from .host import Domain
from .host import IPv4Literal
from .host import parse_host
from .parser.uri_parser import parse_http
from .parser.uri_parser import parse_reference
from .parser.uri_parser import parse_uri
from .path import merge
from .path import reduce_dot_segments
from .resolver import resolve
from .uri import Http
from .uri import RelativeReference
from .uri import Uri

__all__ = [
    "Absent",
    "ComponentKind",
    "Domain",
    "DomainError",
    "Http",
    "IPv4Literal",
    "InvalidFormat",
    "RelativeReference",
    "RfcUriError",
    "Uri",
    "UriParsingError",
    "decode_percent",
    "encode",
    "merge",
    "parse_host",
    "parse_http",
    "parse_reference",
    "parse_uri",
    "reduce_dot_segments",
    "resolve",
]
