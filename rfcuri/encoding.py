"""
Percent-encoding of URI components (RFC 3986 2.1).

Every component allows the unreserved characters and the sub-delims
unencoded, plus a few delimiters that are not ambiguous inside it.
"""
from enum import Enum
from urllib.parse import quote_from_bytes
from urllib.parse import unquote

SUB_DELIMS = "!$&'()*+,;="


class ComponentKind(Enum):
    USER_INFO = "user-info"
    PATH_SEGMENT = "path-segment"
    QUERY = "query"
    FRAGMENT = "fragment"

    @property
    def allowed(self) -> str:
        return allowed_characters[self]


allowed_characters = {
    ComponentKind.USER_INFO: SUB_DELIMS + ":",
    ComponentKind.PATH_SEGMENT: SUB_DELIMS + ":@",
    ComponentKind.QUERY: SUB_DELIMS + ":@/?",
    ComponentKind.FRAGMENT: SUB_DELIMS + ":@/?",
}


def encode(kind: ComponentKind, raw: str) -> str:
    """
    Percent-encode every UTF-8 byte of ``raw`` that is neither unreserved
    nor in the allowed set of ``kind``.

    >>> encode(ComponentKind.USER_INFO, "user@name")
    'user%40name'
    >>> encode(ComponentKind.QUERY, "key=value&another=value#")
    'key=value&another=value%23'
    """
    return quote_from_bytes(_to_bytes(raw), safe=kind.allowed)


def _to_bytes(raw: str) -> bytes:
    # bytes kept aside by decode_percent go back out as they came in
    try:
        return raw.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return raw.encode("utf-8", "surrogatepass")


def encode_path(path: str) -> str:
    return "/".join(
        encode(ComponentKind.PATH_SEGMENT, segment) for segment in path.split("/")
    )


def decode_percent(text: str) -> str:
    """
    Replace ``%XX`` sequences with the bytes they stand for. A ``+`` is
    not a space here, that is a form-encoding convention. Bytes that are
    not valid UTF-8 are kept as surrogate escapes so they can be encoded
    back unchanged.
    """
    return unquote(text, encoding="utf-8", errors="surrogateescape")
