"""
Reference resolution, RFC 3986 5.2.2
"""
import logging

from .errors import DomainError
from .path import merge
from .path import reduce_dot_segments
from .settings import LOGGER_NAME
from .uri import Uri

log = logging.getLogger(LOGGER_NAME)


def resolve(base: Uri, reference: Uri) -> Uri:
    """
    Resolve ``reference`` against ``base``.

    The result has the same type as ``base``, so resolving against an
    :class:`~rfcuri.uri.Http` base gives an ``Http`` value.

    :Example:

    >>> from rfcuri import parse_http, parse_reference
    >>> str(resolve(parse_http("http://a/b/c/d;p?q"), parse_reference("../g")))
    'http://a/b/g'
    """
    if not base.is_absolute():
        raise DomainError(f"Base URI must be an absolute URI, got {str(base)!r}")

    if reference.scheme:
        scheme = reference.scheme
        user, host, port = reference.user, reference.host, reference.port
        path = reference.path
        query = reference.query
    else:
        if reference.has_authority():
            user, host, port = reference.user, reference.host, reference.port
            path = reference.path
            query = reference.query
        else:
            if reference.path == "":
                path = ""
                query = reference.query or base.query
            else:
                if reference.path.startswith("/"):
                    path = reference.path
                else:
                    path = reduce_dot_segments(
                        merge(base.path, reference.path, base.has_authority())
                    )
                query = reference.query
            user, host, port = base.user, base.host, base.port
        scheme = base.scheme
    fragment = reference.fragment

    log.debug(f"Resolving {str(reference)!r} against {str(base)!r}")
    return base._derive(scheme, host, user, port, path, query, fragment)
