import pytest

from oauth_helper.clients import JsonFieldExtractor

BODY = b'{"aud": "client", "expires_in": 3599, "verified": true, "user": {"emails": ["a@x.test", "b@x.test"]}}'


@pytest.mark.parametrize(
    "path, expected",
    [
        ("aud", "client"),
        ("user.emails.1", "b@x.test"),
        ("missing", ""),
        ("user.missing", ""),
        ("user.emails.5", ""),
        ("user.emails.first", ""),
        ("aud.nested", ""),
        # only JSON strings are read
        ("expires_in", ""),
        ("verified", ""),
        ("user", ""),
    ],
)
def test_get(path, expected):
    assert JsonFieldExtractor().get(BODY, path) == expected


@pytest.mark.parametrize("body", [b"", b"not json", b"\xff\xfe", b'["aud"]'])
def test_unreadable_bodies_read_as_empty(body):
    assert JsonFieldExtractor().get(body, "aud") == ""


@pytest.mark.parametrize("path", ["a.²", "a.٣", "a.-1", "a. 0"])
def test_non_ascii_or_signed_indexes_read_as_empty(path):
    assert JsonFieldExtractor().get(b'{"a": ["x", "y", "z", "w"]}', path) == ""
