import re

from .uri import InvalidFormat


class UriParsingError(InvalidFormat):
    def __init__(self, uri: str, http_only: bool = False):
        text = "Can't decompose this URI, please check that it follows RFC 3986"

        scheme_match = re.match(r"(?P<scheme>[^:/?#]+):", uri)
        for i in range(1):
            if http_only:
                if not scheme_match:
                    text = "Uri should starts with `http://` or `https://`."
                    break
                if scheme_match.group("scheme").lower() not in ("http", "https"):
                    text = (
                        f"Unsupported scheme `{scheme_match.group('scheme')}`, "
                        "expected `http` or `https`."
                    )
                    break
                if not uri[scheme_match.end():].startswith("//"):
                    text = "Missing authority part, expected `//` after the scheme."
                    break
                if re.match(
                    r"//(?:[^/?#@]*@)?(?::[^/?#]*)?(?:[/?#]|$)", uri[scheme_match.end():]
                ):
                    text = "Missing host, http(s) URIs require one."
                    break
            elif scheme_match and re.fullmatch(
                r"[a-z][a-z0-9+.-]*", scheme_match.group("scheme"), re.IGNORECASE
            ) is None:
                text = f"Malformed scheme `{scheme_match.group('scheme')}`."
                break

            port_match = re.match(r"(?:[^:/?#]+:)?//[^/?#]*:(?P<port>[^/?#@]*)(?:[/?#]|$)", uri)
            port = port_match.group("port") if port_match else ""
            if port and not port.isdigit():
                text = f"Port should be a decimal number, got `{port}`."
                break

        super(UriParsingError, self).__init__("uri", uri, text)
