"""
Host component of a URI (RFC 3986 3.2.2).

A host is one of a closed set of variants: a registered domain name, an
IPv4 literal or no host at all.
"""
import logging
import re
from typing import Union

import dns.exception
import dns.name
from lark import Lark
from lark.exceptions import LarkError

from .errors import InvalidFormat
from .settings import CHECK_DNS_LENGTHS
from .settings import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)


class Domain:
    """
    RFC 1034 3.5 preferred name syntax, normalized to lowercase
    as required by RFC 3986 3.2.2.

    >>> str(Domain("WWW.Example.com"))
    'www.example.com'
    """

    label_regex = r"[a-z](?:-?[a-z0-9])*"
    domain_regex = re.compile(
        rf"{label_regex}(?:\.{label_regex})*", re.IGNORECASE | re.ASCII
    )

    __slots__ = ("_domain",)

    def __init__(self, domain: str):
        if not isinstance(domain, str) or self.domain_regex.fullmatch(domain) is None:
            raise InvalidFormat("host", domain, "expected a domain name")

        if CHECK_DNS_LENGTHS:
            self.check_lengths(domain)
        self._domain = domain.lower()

    @classmethod
    def parse(cls, value: str) -> "Domain":
        return cls(value)

    @staticmethod
    def check_lengths(domain: str) -> None:
        # labels are limited to 63 octets, names to 255 octets in wire format
        try:
            dns.name.from_text(domain)
        except dns.exception.DNSException as exc:
            raise InvalidFormat("host", domain, str(exc)) from exc

    @property
    def labels(self):
        return tuple(self._domain.split("."))

    def __eq__(self, other):
        if not isinstance(other, Domain):
            return NotImplemented
        return self._domain == other._domain

    def __hash__(self):
        return hash((Domain, self._domain))

    def __str__(self) -> str:
        return self._domain

    def __repr__(self):
        return f"<Domain {self._domain}>"


class IPv4Literal:
    """
    Dotted-decimal IPv4 address. Leading zeros are stripped from
    every octet, so ``255.010.0.1`` is stored as ``255.10.0.1``.
    """

    dec_octet = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9]?[0-9])"
    address_regex = re.compile(rf"{dec_octet}(?:\.{dec_octet}){{3}}", re.ASCII)

    __slots__ = ("_address",)

    def __init__(self, address: str):
        if not isinstance(address, str) or self.address_regex.fullmatch(address) is None:
            raise InvalidFormat("host", address, "expected an IPv4 address")

        self._address = ".".join(str(int(octet)) for octet in address.split("."))

    @classmethod
    def parse(cls, value: str) -> "IPv4Literal":
        return cls(value)

    @property
    def octets(self):
        return tuple(int(octet) for octet in self._address.split("."))

    def __eq__(self, other):
        if not isinstance(other, IPv4Literal):
            return NotImplemented
        return self._address == other._address

    def __hash__(self):
        return hash((IPv4Literal, self._address))

    def __str__(self) -> str:
        return self._address

    def __repr__(self):
        return f"<IPv4Literal {self._address}>"


class Absent:
    """
    Marker for a URI without a host component.
    """

    __slots__ = ()

    def __bool__(self):
        return False

    def __eq__(self, other):
        if not isinstance(other, Absent):
            return NotImplemented
        return True

    def __hash__(self):
        return hash(Absent)

    def __str__(self) -> str:
        return ""

    def __repr__(self):
        return "<Absent>"


Host = Union[Domain, IPv4Literal, Absent]


class HostParser:
    """
    Decide which host variant a raw string is written as. Range and
    label checks are left to the variant constructors.
    """

    parser = Lark(
        r"""
            ?host:      ipv4 | domain
            ipv4:       OCTET "." OCTET "." OCTET "." OCTET
            domain:     LABEL ("." LABEL)*
            OCTET:      /[0-9]+/
            LABEL:      /[a-z][a-z0-9-]*/i
        """,
        parser="lalr",
        start="host",
    )

    variants = {
        "ipv4": IPv4Literal,
        "domain": Domain,
    }

    @classmethod
    def parse(cls, value: str) -> Host:
        if not value:
            return Absent()

        try:
            tree = cls.parser.parse(value)
        except LarkError as exc:
            raise InvalidFormat(
                "host", value, "neither a domain name nor an IPv4 address"
            ) from exc

        variant = cls.variants[tree.data]
        log.trace(f"Host {value!r} classified as {variant.__name__}")  # type: ignore
        return variant(value)


def parse_host(value: str) -> Host:
    return HostParser.parse(value)
