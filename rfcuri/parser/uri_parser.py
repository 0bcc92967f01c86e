import logging
import re
from typing import NamedTuple
from typing import Optional
from typing import Tuple

from ..encoding import decode_percent
from ..errors import InvalidFormat
from ..errors import UriParsingError
from ..host import Absent
from ..host import Host
from ..host import parse_host
from ..settings import LOGGER_NAME
from ..uri import Http
from ..uri import RelativeReference
from ..uri import Uri

log = logging.getLogger(LOGGER_NAME)


class UriComponents(NamedTuple):
    scheme: str
    host: Host
    user: str
    port: Optional[int]
    path: str
    query: str
    fragment: str


class UriParser3986:
    """
    Split a URI string into its components with the regular expression
    from RFC 3986 Appendix B. User, path, query and fragment come back
    percent-decoded, the value types encode them again on output.
    """

    uri_parsing_regex = re.compile(
        r"^(([^:/?#]+):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?", re.DOTALL
    )
    port_regex = re.compile(r"[0-9]*", re.ASCII)

    def decompose(self, value: str) -> UriComponents:
        # every group is optional, so any string matches
        match = self.uri_parsing_regex.match(value)

        scheme = match.group(2) or ""
        authority = match.group(4)
        path = match.group(5)
        query = match.group(7) or ""
        fragment = match.group(9) or ""

        if authority is not None:
            user, host, port = self.split_authority(value, authority)
        else:
            user, host, port = "", Absent(), None

        components = UriComponents(
            scheme=scheme,
            host=host,
            user=user,
            port=port,
            path=decode_percent(path),
            query=decode_percent(query),
            fragment=decode_percent(fragment),
        )
        log.trace(f"{value!r} decomposed into {components}")  # type: ignore
        return components

    def split_authority(self, value: str, authority: str) -> Tuple[str, Host, Optional[int]]:
        sep_ind = authority.find("@")
        if sep_ind != -1:
            user = decode_percent(authority[:sep_ind])
            authority = authority[sep_ind + 1 :]
        else:
            user = ""

        sep_ind = authority.rfind(":")
        if sep_ind != -1:
            raw_port = authority[sep_ind + 1 :]
            authority = authority[:sep_ind]
            if self.port_regex.fullmatch(raw_port) is None:
                raise UriParsingError(value)
            # "host:" is allowed and means the default port
            port = int(raw_port) if raw_port else None
        else:
            port = None

        return user, parse_host(authority), port

    def parse(self, value: str) -> Uri:
        return Uri(*self.decompose(value))


class HttpParser(UriParser3986):
    def parse(self, value: str) -> Http:
        components = self.decompose(value)
        if not Http.is_http_scheme(components.scheme) or not components.host:
            raise UriParsingError(value, http_only=True)

        return Http(*components)


class RelativeReferenceParser(UriParser3986):
    def parse(self, value: str) -> RelativeReference:
        components = self.decompose(value)
        if components.scheme:
            raise InvalidFormat(
                "scheme", components.scheme, "relative references have no scheme"
            )

        _, *rest = components
        return RelativeReference(*rest)


uri_parser = UriParser3986()
http_parser = HttpParser()
reference_parser = RelativeReferenceParser()


def parse_uri(value: str) -> Uri:
    return uri_parser.parse(value)


def parse_http(value: str) -> Http:
    return http_parser.parse(value)


def parse_reference(value: str) -> RelativeReference:
    return reference_parser.parse(value)
