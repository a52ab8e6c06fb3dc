"""Tests for token extraction and composite token helpers."""

import pytest

from blade_access import MalformedResponse, NoTokenField
from blade_access.tokens import (
    TOKEN_FIELD_NAMES,
    build_session_cookie,
    extract_token,
    mask_token,
    split_composite_token,
)


class TestExtractToken:
    def test_access_token_camel_case(self):
        assert extract_token({"accessToken": "abc"}) == "abc"

    def test_access_token_snake_case(self):
        assert extract_token({"access_token": "xyz"}) == "xyz"

    def test_camel_case_wins(self):
        assert extract_token({"access_token": "old", "accessToken": "new"}) == "new"

    def test_empty_payload(self):
        with pytest.raises(NoTokenField):
            extract_token({})

    def test_non_string_value_is_skipped(self):
        assert extract_token({"accessToken": 123, "access_token": "xyz"}) == "xyz"

    def test_non_string_only(self):
        with pytest.raises(NoTokenField):
            extract_token({"accessToken": None})

    def test_no_token_field_is_malformed_response(self):
        with pytest.raises(MalformedResponse):
            extract_token({"refresh_token": "r"})

    def test_extra_field_names(self):
        assert extract_token({"token": "t"}, TOKEN_FIELD_NAMES + ("token",)) == "t"


class TestSplitCompositeToken:
    def test_split(self):
        assert split_composite_token("user-123::sess-abc") == ("user-123", "sess-abc")

    def test_percent_encoded_delimiter(self):
        assert split_composite_token("user-123%3A%3Asess-abc") == ("user-123", "sess-abc")

    def test_no_delimiter(self):
        with pytest.raises(MalformedResponse):
            split_composite_token("user-123")

    def test_extra_parts_are_dropped(self):
        assert split_composite_token("a::b::c") == ("a", "b")

    def test_token_half_is_not_decoded(self):
        assert split_composite_token("user_1%3A%3Aabc%2Fdef%41") == ("user_1", "abc%2Fdef%41")

    def test_lowercase_encoding_is_not_a_delimiter(self):
        with pytest.raises(MalformedResponse):
            split_composite_token("user_1%3a%3aabc")


class TestSessionCookie:
    def test_cookie_value(self):
        assert build_session_cookie("user_1", "tok") == "WorkosCursorSessionToken=user_1%3A%3Atok"


class TestMaskToken:
    def test_long_token(self):
        assert mask_token("abcdefghijklmnopq") == "abcd...nopq"

    def test_medium_token(self):
        assert mask_token("abcdefgh") == "abcd..."

    def test_short_token(self):
        assert mask_token("abc") == "***"
