"""
Path helpers for reference resolution (RFC 3986 5.2.3 and 5.2.4).
"""
from typing import List


def reduce_dot_segments(path: str) -> str:
    """
    RFC 3986 5.2.4 Remove Dot Segments

    Only absolute paths are reduced, doing the same to a rootless
    path would change what the reference points to.

    >>> reduce_dot_segments("/a/b/c/./../../g")
    '/a/g'
    >>> reduce_dot_segments("mid/content=5/../6")
    'mid/content=5/../6'
    """
    if not path.startswith("/"):
        return path

    output: List[str] = []
    while path:
        # A.  If the input buffer begins with a prefix of "../" or "./",
        #     then remove that prefix from the input buffer
        if path.startswith("../"):
            path = path[3:]
        elif path.startswith("./"):
            path = path[2:]

        # B.  if the input buffer begins with a prefix of "/./" or "/.",
        #     where "." is a complete path segment, then replace that
        #     prefix with "/" in the input buffer
        elif path.startswith("/./"):
            path = path[2:]
        elif path == "/.":
            path = "/"

        # C.  if the input buffer begins with a prefix of "/../" or "/..",
        #     where ".." is a complete path segment, then replace that
        #     prefix with "/" in the input buffer and remove the last
        #     segment and its preceding "/" (if any) from the output buffer
        elif path.startswith("/../"):
            path = path[3:]
            if output:
                output.pop()
        elif path == "/..":
            path = "/"
            if output:
                output.pop()

        # D.  if the input buffer consists only of "." or "..", then remove
        #     that from the input buffer
        elif path in (".", ".."):
            path = ""

        # E.  move the first path segment in the input buffer to the end of
        #     the output buffer
        else:
            next_slash = path.find("/", 1)
            if next_slash == -1:
                output.append(path)
                path = ""
            else:
                output.append(path[:next_slash])
                path = path[next_slash:]

    return "".join(output)


def merge(base_path: str, relative_path: str, base_has_authority: bool) -> str:
    """
    RFC 3986 5.2.3 Merge Paths

    >>> merge("/b/c/d", "g", True)
    '/b/c/g'
    >>> merge("", "g", True)
    '/g'
    """
    if base_has_authority and base_path == "":
        return "/" + relative_path

    # a base path without any "/" is dropped as a whole
    last_slash = base_path.rfind("/")
    return base_path[: last_slash + 1] + relative_path
