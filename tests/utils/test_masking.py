"""Testes de mascaramento de segredos."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

from utils.masking import MASK, mask_authorization, mask_payload, mask_secret, mask_url


def test_mask_secret_keeps_prefix() -> None:
    assert mask_secret("abc123456789") == "abc1***"
    assert mask_secret("abc123456789", visible=6) == "abc123***"


def test_mask_secret_short_and_empty() -> None:
    assert mask_secret("abc") == MASK
    assert mask_secret("") == ""


def test_mask_authorization_keeps_scheme() -> None:
    assert mask_authorization("Bearer abcdefgh") == "Bearer abcd***"
    assert mask_authorization("abcdefgh") == "abcd***"


def test_mask_url_masks_only_secret_keys() -> None:
    masked = mask_url("https://api.test/carousel?apiToken=abcdefgh&limit=10")
    query = parse_qs(urlsplit(masked).query)
    assert query == {"apiToken": ["abcd***"], "limit": ["10"]}


def test_mask_url_keeps_mask_readable() -> None:
    masked = mask_url("https://api.test/carousel?apiToken=abcdefgh&limit=10")
    assert masked == "https://api.test/carousel?apiToken=abcd***&limit=10"


def test_mask_url_without_query_is_unchanged() -> None:
    assert mask_url("https://api.test/v2/terms") == "https://api.test/v2/terms"


def test_mask_payload_is_recursive_and_copies() -> None:
    payload = {
        "apiTokens": ["abcdefgh", "ijklmnop"],
        "websitePropertyIds": [1],
        "nested": {"apiToken": "abcdefgh", "name": "x"},
    }

    masked = mask_payload(payload)

    assert masked == {
        "apiTokens": ["abcd***", "ijkl***"],
        "websitePropertyIds": [1],
        "nested": {"apiToken": "abcd***", "name": "x"},
    }
    assert payload["apiTokens"] == ["abcdefgh", "ijklmnop"]


def test_mask_payload_non_string_secret() -> None:
    assert mask_payload({"token": 123}) == {"token": MASK}
