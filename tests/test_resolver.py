import pytest

from rfcuri import Domain
from rfcuri import DomainError
from rfcuri import Http
from rfcuri import InvalidFormat
from rfcuri import RelativeReference
from rfcuri import Uri
from rfcuri import parse_http
from rfcuri import parse_reference
from rfcuri import resolve


class TestResolve:
    def test_base_not_absolute(self, example_domain):
        base = Http("https", example_domain, "", None, "", "", "fragment")
        reference = Http("https", example_domain, "", None, "", "", "new-fragment")

        with pytest.raises(DomainError):
            resolve(base, reference)

        with pytest.raises(DomainError):
            base.resolve(reference)

    @pytest.mark.parametrize(
        argnames=["reference", "expected"],
        argvalues=[
            (
                Http("https", Domain("www.example.com"), "", None, "", "", ""),
                "https://www.example.com",
            ),
            (
                RelativeReference(Domain("www.test.com"), "user", 40, "", "", ""),
                "http://user@www.test.com:40",
            ),
            (
                RelativeReference(None, "", None, "", "", ""),
                "http://username@www.example.com:80?query",
            ),
            (
                RelativeReference(None, "", None, "", "new-query", ""),
                "http://username@www.example.com:80?new-query",
            ),
            (
                RelativeReference(None, "", None, "/a/b/c", "", ""),
                "http://username@www.example.com:80/a/b/c",
            ),
            (
                RelativeReference(None, "", None, "d/e/f", "", ""),
                "http://username@www.example.com:80/a/b/d/e/f",
            ),
            (
                RelativeReference(None, "", None, "", "", "frag"),
                "http://username@www.example.com:80?query#frag",
            ),
            (
                RelativeReference(None, "", None, "g", "", "frag"),
                "http://username@www.example.com:80/a/b/g#frag",
            ),
        ],
    )
    def test_resolve(self, base_uri, reference, expected):
        resolved = resolve(base_uri, reference)

        assert str(resolved) == expected
        assert isinstance(resolved, Http)
        assert base_uri.resolve(reference) == resolved

    @pytest.mark.parametrize(
        argnames=["base_path", "relative_path", "expected"],
        argvalues=[
            ("", "d/e/f", "/d/e/f"),
            ("/b/c", "d/e/f", "/b/d/e/f"),
            ("/b/c/", "d/e/f", "/b/c/d/e/f"),
            # RFC 3986 5.4.1
            ("/b/c/d", "g", "/b/c/g"),
            ("/b/c/d", "./g", "/b/c/g"),
            ("/b/c/d", "g/", "/b/c/g/"),
            ("/b/c/d", "/g", "/g"),
            ("/b/c/d", ".", "/b/c/"),
            ("/b/c/d", "./", "/b/c/"),
            ("/b/c/d", "..", "/b/"),
            ("/b/c/d", "../", "/b/"),
            ("/b/c/d", "../g", "/b/g"),
            ("/b/c/d", "../..", "/"),
            ("/b/c/d", "../../", "/"),
            ("/b/c/d", "../../g", "/g"),
            # RFC 3986 5.4.2
            ("/b/c/d", "../../../g", "/g"),
            ("/b/c/d", "../../../../g", "/g"),
            ("/b/c/d", "/./g", "/g"),
            ("/b/c/d", "/../g", "/g"),
            ("/b/c/d", "g.", "/b/c/g."),
            ("/b/c/d", ".g", "/b/c/.g"),
            ("/b/c/d", "g..", "/b/c/g.."),
            ("/b/c/d", "..g", "/b/c/..g"),
            ("/b/c/d", "./../g", "/b/g"),
            ("/b/c/d", "./g/.", "/b/c/g/"),
            ("/b/c/d", "g/./h", "/b/c/g/h"),
            ("/b/c/d", "g/../h", "/b/c/h"),
            ("/b/c/d", "g;x=1/./y", "/b/c/g;x=1/y"),
            ("/b/c/d", "g;x=1/../y", "/b/c/y"),
        ],
    )
    def test_path_merge(self, example_domain, base_path, relative_path, expected):
        base = Http("http", example_domain, "", None, base_path, "", "")
        reference = RelativeReference(None, "", None, relative_path, "", "")

        assert resolve(base, reference).path == expected

    def test_normal_examples(self):
        base = parse_http("http://a/b/c/d;p?q")
        examples = {
            "g": "http://a/b/c/g",
            "./g": "http://a/b/c/g",
            "/g": "http://a/g",
            "//g": "http://g",
            "?y": "http://a?y",
            "g?y": "http://a/b/c/g?y",
            "#s": "http://a?q#s",
            "g#s": "http://a/b/c/g#s",
            "g?y#s": "http://a/b/c/g?y#s",
            ";x": "http://a/b/c/;x",
            "g;x?y#s": "http://a/b/c/g;x?y#s",
        }
        for reference, expected in examples.items():
            assert str(resolve(base, parse_reference(reference))) == expected

    def test_reference_with_scheme(self):
        reference = Uri("urn", None, "", None, "isbn:0451450523", "", "")
        generic_base = Uri("http", Domain("a"), "", None, "/b")
        resolved = resolve(generic_base, reference)
        assert type(resolved) is Uri
        assert str(resolved) == "urn:isbn:0451450523"

    def test_http_base_rejects_foreign_scheme(self, base_uri):
        reference = Uri("ftp", Domain("files.example.com"), "", None, "/pub")
        with pytest.raises(InvalidFormat):
            resolve(base_uri, reference)

    def test_relative_base(self):
        base = RelativeReference(Domain("example.com"), "", None, "/a/b")

        resolved = resolve(base, RelativeReference(None, "", None, "c"))
        assert type(resolved) is RelativeReference
        assert str(resolved) == "//example.com/a/c"

        resolved = resolve(base, Http("https", Domain("example.org")))
        assert type(resolved) is Uri
        assert str(resolved) == "https://example.org"

    def test_base_without_slash_in_path(self):
        base = Uri("urn", None, "", None, "example")
        resolved = resolve(base, RelativeReference(None, "", None, "g"))
        assert str(resolved) == "urn:g"

    def test_resolved_double_slash_path_without_authority(self):
        base = Http("http", None, "", None, "/a")
        reference = RelativeReference(None, "", None, "/.//g")

        resolved = resolve(base, reference)
        assert resolved.path == "//g"
        assert str(resolved) == "http:/g"

    def test_base_and_reference_are_unchanged(self, base_uri):
        reference = RelativeReference(None, "", None, "../x", "", "f")
        before = (str(base_uri), str(reference))

        resolve(base_uri, reference)
        assert (str(base_uri), str(reference)) == before
