"""Decode pipeline: valid words decode, everything else passes through unchanged."""

import logging

import pytest

from mimeword.services.codec.decoder import decode_s, decode_steps, tokenize
from mimeword.services.charsets.codecs_provider import get_charset_provider
from mimeword.services.codec.errors import InvalidArgument


@pytest.mark.parametrize(
    "word, expected",
    [
        ("=?utf-8?B?Y2Fmw6k=?=", "café"),
        ("=?utf-8?Q?caf=C3=A9?=", "café"),
        ("=?UTF-8?q?caf=c3=a9?=", "café"),
        ("=?utf-8?b?Y2Fmw6k=?=", "café"),
        ("=?iso-8859-1?Q?caf=E9?=", "café"),
        ("=?utf-8?Q?a_b=20c?=", "a b c"),
        ("=?utf-8?Q??=", ""),
    ],
)
def test_valid_words_decode(word, expected):
    assert decode_s(word) == expected


def test_language_tag_is_discarded():
    assert decode_s("=?UTF-8*en-us?B?Y2Fmw6k=?=") == "café"
    assert tokenize("=?utf-8*fr?Q?x?=").value == ("utf-8", "Q", "x")


@pytest.mark.parametrize(
    "word",
    [
        "plain-ascii-header",
        "a?b",
        "=?utf-8?Q?caf=C3=A9?= trailing?",
        "=?utf-8?Q?abc",
        "",
    ],
)
def test_wrong_token_count_passes_through(word):
    assert decode_s(word) == word


@pytest.mark.parametrize("word", ["=?utf-8?X?abc?=", "=?utf-8??abc?=", "=?utf-8?QB?abc?="])
def test_unknown_scheme_passes_through(word):
    assert decode_s(word) == word


@pytest.mark.parametrize(
    "word",
    [
        "=?bogus-charset?Q?abc?=",
        "=??Q?abc?=",
        "=?base64?Q?abc?=",
        "=?utf-8?B?!!!?=",
        "=?utf-8?B?Y2Fmw6k?=",
        "=?utf-8?Q?caf=ZZ?=",
        "=?utf-8?Q?caf=C?=",
        "=?utf-8?Q?café?=",
        "=?utf-8?Q?=C3?=",
        "=?ascii?B?Y2Fmw6k=?=",
        "=?utf\x00-8?Q?abc?=",
        "=?idna?Q?abc?=",
    ],
)
def test_malformed_words_pass_through(word):
    assert decode_s(word) == word


def test_failure_reason_is_reported_by_steps():
    outcome = decode_steps("=?bogus-charset?Q?abc?=", get_charset_provider())
    assert not outcome.ok
    assert "bogus-charset" in outcome.reason


def test_pass_through_is_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="mimeword.services.codec.decoder")
    decode_s("=?utf-8?X?abc?=")
    assert "Encoded-word left as is" in caplog.text


def test_none_is_invalid_argument():
    with pytest.raises(InvalidArgument):
        decode_s(None)


def test_fake_provider_is_used(fake_provider):
    assert decode_s("=?x-xor?B?wqg=?=", fake_provider) == "é"
    assert fake_provider.resolved == ["x-xor"]
    # Unknown to the default provider
    assert decode_s("=?x-xor?B?wqg=?=") == "=?x-xor?B?wqg=?="
    # Real charsets are unknown to the fake provider
    assert decode_s("=?utf-8?B?Y2Fmw6k=?=", fake_provider) == "=?utf-8?B?Y2Fmw6k=?="
