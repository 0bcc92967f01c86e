"""
RFC 3986 URI value types.

Components are stored raw (percent-decoded) and encoded again only when
the URI is turned into a string. Values never change after construction,
every operation that "modifies" a URI returns a new one.
"""
import re
from typing import Optional
from typing import Tuple
from typing import Union

from .encoding import ComponentKind
from .encoding import encode
from .encoding import encode_path
from .errors import InvalidFormat
from .host import Absent
from .host import Domain
from .host import Host
from .host import IPv4Literal
from .host import parse_host
from .path import reduce_dot_segments

MAX_PORT = (1 << 16) - 1


def _has_authority(host: Host, user: str, port: Optional[int]) -> bool:
    return bool(host) or bool(user) or port is not None


class Uri:
    """
    Generic URI or relative reference.

    :Example:

    >>> from rfcuri.host import Domain
    >>> str(Uri("HTTP", Domain("www.example.com"), "user", 80, "/a/./b", "q=1", ""))
    'http://user@www.example.com:80/a/b?q=1'
    """

    scheme_regex = re.compile(r"[a-z][a-z0-9+.-]*", re.IGNORECASE | re.ASCII)

    __slots__ = ("_scheme", "_host", "_user", "_port", "_path", "_query", "_fragment")

    def __init__(
        self,
        scheme: str,
        host: Union[Host, str, None],
        user: str = "",
        port: Optional[int] = None,
        path: str = "",
        query: str = "",
        fragment: str = "",
    ):
        if host is None:
            host = Absent()
        elif isinstance(host, str):
            host = parse_host(host)
        elif not isinstance(host, (Domain, IPv4Literal, Absent)):
            raise TypeError(f"Unexpected host type {type(host).__name__}")

        if not self.is_valid_user(user):
            raise InvalidFormat("user", user, "`:` is not allowed in the user")
        if not self.is_valid_port(port):
            raise InvalidFormat("port", port, f"expected an integer from 0 to {MAX_PORT}")
        if not self.is_valid_path(path, _has_authority(host, user, port)):
            raise InvalidFormat("path", path, "does not fit the authority component")
        if not self.is_valid_text(query):
            raise InvalidFormat("query", query, "expected a string")
        if not self.is_valid_text(fragment):
            raise InvalidFormat("fragment", fragment, "expected a string")
        if not self.is_valid_scheme(scheme):
            raise InvalidFormat("scheme", scheme)

        self._scheme = scheme.lower()
        self._host = host
        self._user = user
        self._port = port
        self._path = reduce_dot_segments(path)
        self._query = query
        self._fragment = fragment

    @classmethod
    def is_valid_scheme(cls, scheme: str) -> bool:
        """
        RFC 3986 3.1, an empty scheme marks a relative reference.
        """
        if not isinstance(scheme, str):
            return False
        return scheme == "" or cls.scheme_regex.fullmatch(scheme) is not None

    @staticmethod
    def is_valid_user(user: str) -> bool:
        return isinstance(user, str) and ":" not in user

    @staticmethod
    def is_valid_port(port: Optional[int]) -> bool:
        if port is None:
            return True
        if isinstance(port, bool) or not isinstance(port, int):
            return False
        return 0 <= port <= MAX_PORT

    @staticmethod
    def is_valid_text(value: str) -> bool:
        return isinstance(value, str)

    @staticmethod
    def is_valid_path(path: str, has_authority: bool) -> bool:
        """
        RFC 3986 3.3

        With an authority the path must be path-abempty, without one
        it must not start with "//".
        """
        if not isinstance(path, str):
            return False
        if has_authority:
            return path == "" or path.startswith("/")
        return not path.startswith("//")

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def host(self) -> Host:
        return self._host

    @property
    def user(self) -> str:
        return self._user

    @property
    def port(self) -> Optional[int]:
        return self._port

    @property
    def path(self) -> str:
        return self._path

    @property
    def query(self) -> str:
        return self._query

    @property
    def fragment(self) -> str:
        return self._fragment

    @property
    def authority(self) -> str:
        user = encode(ComponentKind.USER_INFO, self._user)
        if user:
            user = user + "@"

        port = f":{self._port}" if self._port is not None else ""
        return f"{user}{self._host}{port}"

    def has_authority(self) -> bool:
        return _has_authority(self._host, self._user, self._port)

    def is_absolute(self) -> bool:
        """
        RFC 3986 4.3, an absolute URI carries no fragment.
        """
        return self._fragment == ""

    def resolve(self, reference: "Uri") -> "Uri":
        from .resolver import resolve

        return resolve(self, reference)

    def _derive(
        self,
        scheme: str,
        host: Host,
        user: str,
        port: Optional[int],
        path: str,
        query: str,
        fragment: str,
    ) -> "Uri":
        """
        Build a URI of the same kind from components that were taken
        from other URIs. Construction checks run again on the result.
        """
        return type(self)(
            scheme,
            host,
            user,
            port,
            _constructible_path(path, _has_authority(host, user, port)),
            query,
            fragment,
        )

    def _components(self) -> Tuple:
        return (
            self._scheme,
            self._host,
            self._user,
            self._port,
            self._path,
            self._query,
            self._fragment,
        )

    def _encoded_path(self) -> str:
        path = self._path
        has_authority = self.has_authority()
        if not has_authority and path.startswith("//"):
            path = "/" + path.lstrip("/")

        path = encode_path(path)
        if not self._scheme and not has_authority:
            # RFC 3986 4.2, a colon in the first segment would read as a scheme
            first, sep, rest = path.partition("/")
            path = first.replace(":", "%3A") + sep + rest
        return path

    def __eq__(self, other):
        if not isinstance(other, Uri):
            return NotImplemented
        return type(self) is type(other) and self._components() == other._components()

    def __hash__(self):
        return hash((type(self), self._components()))

    def __str__(self) -> str:
        scheme = f"{self._scheme}:" if self._scheme else ""
        authority = f"//{self.authority}" if self.has_authority() else ""
        path = self._encoded_path()

        query = encode(ComponentKind.QUERY, self._query)
        if query:
            query = "?" + query

        fragment = encode(ComponentKind.FRAGMENT, self._fragment)
        if fragment:
            fragment = "#" + fragment

        return f"{scheme}{authority}{path}{query}{fragment}"

    def __repr__(self):
        return f"<{type(self).__name__} {str(self)}>"


class Http(Uri):
    """
    http(s) URI, RFC 7230 2.7

    >>> from rfcuri.host import Domain
    >>> uri = Http("http", Domain("www.example.com"))
    >>> str(uri.with_scheme("https"))
    'https://www.example.com'
    """

    schemes = frozenset(("http", "https"))

    __slots__ = ()

    def __init__(
        self,
        scheme: str,
        host: Union[Host, str, None],
        user: str = "",
        port: Optional[int] = None,
        path: str = "",
        query: str = "",
        fragment: str = "",
    ):
        if not self.is_http_scheme(scheme):
            raise InvalidFormat("scheme", scheme, "expected `http` or `https`")

        super(Http, self).__init__(scheme, host, user, port, path, query, fragment)

    @classmethod
    def is_http_scheme(cls, scheme: str) -> bool:
        return isinstance(scheme, str) and scheme.lower() in cls.schemes

    def with_scheme(self, scheme: str) -> "Http":
        return self._derive(
            scheme,
            self._host,
            self._user,
            self._port,
            self._path,
            self._query,
            self._fragment,
        )


class RelativeReference(Uri):
    """
    URI reference without a scheme, RFC 3986 4.2
    """

    __slots__ = ()

    def __init__(
        self,
        host: Union[Host, str, None] = None,
        user: str = "",
        port: Optional[int] = None,
        path: str = "",
        query: str = "",
        fragment: str = "",
    ):
        super(RelativeReference, self).__init__("", host, user, port, path, query, fragment)

    def _derive(self, scheme, host, user, port, path, query, fragment) -> Uri:
        path = _constructible_path(path, _has_authority(host, user, port))
        if scheme:
            # a relative reference can't hold a scheme
            return Uri(scheme, host, user, port, path, query, fragment)
        return RelativeReference(host, user, port, path, query, fragment)


def _constructible_path(path: str, has_authority: bool) -> str:
    """
    Dot-segment removal may leave "//" at the start of a path that has
    no authority. Prefixing "/." lets such a path through construction
    again and reduces back to the same value.
    """
    if not has_authority and path.startswith("//"):
        return "/." + path
    return path
