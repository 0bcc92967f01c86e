import logging

import pytest

from rfcuri import Domain
from rfcuri import Http
from rfcuri import IPv4Literal
from rfcuri.settings import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)


@pytest.fixture(scope="session")
def example_domain():
    return Domain("www.example.com")


@pytest.fixture(scope="session")
def example_ip():
    return IPv4Literal("127.0.0.1")


@pytest.fixture()
def base_uri(example_domain):
    uri = Http("http", example_domain, "username", 80, "/a/b/c", "query", "")
    log.debug(f"Base uri for the test is {uri!r}")
    return uri
