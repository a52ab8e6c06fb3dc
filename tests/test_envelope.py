"""Tests for envelope normalization."""

import json

import pytest

from blade_access import BackendError, EnvelopeKind, Outcome, ParseError, normalize


def _body(obj) -> bytes:
    return json.dumps(obj).encode()


class TestLegacyEnvelope:
    def test_success(self):
        outcome = normalize(_body({"status": "success", "message": "fine", "data": {"a": 1}}), EnvelopeKind.LEGACY)
        assert outcome.ok is True
        assert outcome.message == "fine"
        assert outcome.data == {"a": 1}
        assert outcome.code is None
        assert outcome.kind is EnvelopeKind.LEGACY

    def test_failure_drops_data(self):
        outcome = normalize(_body({"status": "error", "message": "nope", "data": {"a": 1}}), EnvelopeKind.LEGACY)
        assert outcome.ok is False
        assert outcome.message == "nope"
        assert outcome.data is None
        assert outcome.parse_error is False

    def test_missing_status_is_parse_error(self):
        outcome = normalize(_body({"message": "x"}), EnvelopeKind.LEGACY)
        assert outcome.ok is False
        assert outcome.parse_error is True

    def test_missing_message_defaults_to_empty(self):
        outcome = normalize(_body({"status": "success", "data": 1}), EnvelopeKind.LEGACY)
        assert outcome.ok is True
        assert outcome.message == ""


class TestBladeEnvelope:
    def test_success(self):
        outcome = normalize(_body({"code": 200, "success": True, "data": "t42", "msg": "ok"}), EnvelopeKind.BLADE)
        assert outcome.ok is True
        assert outcome.code == 200
        assert outcome.data == "t42"
        assert outcome.message == "ok"

    def test_success_flag_with_non_200_code_is_failure(self):
        outcome = normalize(_body({"code": 500, "success": True, "data": "x", "msg": "odd"}), EnvelopeKind.BLADE)
        assert outcome.ok is False
        assert outcome.code == 500
        assert outcome.message == "odd"
        assert outcome.data is None

    def test_failure_without_data(self):
        outcome = normalize(_body({"code": 401, "success": False, "msg": "bad password"}), EnvelopeKind.BLADE)
        assert outcome.ok is False
        assert outcome.message == "bad password"
        assert outcome.parse_error is False

    def test_code_200_with_success_false_is_failure(self):
        outcome = normalize(_body({"code": 200, "success": False, "msg": "no"}), EnvelopeKind.BLADE)
        assert outcome.ok is False

    def test_success_without_data_is_parse_error(self):
        outcome = normalize(_body({"code": 200, "success": True, "msg": "ok"}), EnvelopeKind.BLADE, 200)
        assert outcome.ok is False
        assert outcome.parse_error is True
        assert "data" in outcome.message

    def test_success_with_null_data_is_parse_error(self):
        outcome = normalize(_body({"code": 200, "success": True, "data": None, "msg": "ok"}), EnvelopeKind.BLADE)
        assert outcome.parse_error is True

    @pytest.mark.parametrize(
        "body",
        [
            {"code": "200", "success": True},
            {"code": True, "success": True},
            {"code": 200, "success": "true"},
            {"success": True, "data": 1},
        ],
    )
    def test_wrongly_typed_fields_are_parse_errors(self, body):
        outcome = normalize(_body(body), EnvelopeKind.BLADE)
        assert outcome.ok is False
        assert outcome.parse_error is True

    def test_top_level_array_is_parse_error(self):
        outcome = normalize(b"[1, 2]", EnvelopeKind.BLADE)
        assert outcome.parse_error is True
        assert "array" in outcome.message


class TestThirdPartyEnvelope:
    def test_2xx_object_is_data(self):
        outcome = normalize(_body({"gpt-4": {"numRequests": 3}}), EnvelopeKind.THIRD_PARTY, 200)
        assert outcome.ok is True
        assert outcome.data == {"gpt-4": {"numRequests": 3}}
        assert outcome.code == 200

    def test_non_2xx_is_failure(self):
        outcome = normalize(b'{"error": "unauthorized"}', EnvelopeKind.THIRD_PARTY, 401)
        assert outcome.ok is False
        assert outcome.message.startswith("HTTP 401")
        assert outcome.data is None
        assert outcome.parse_error is False

    def test_2xx_with_non_object_is_parse_error(self):
        outcome = normalize(b'"just a string"', EnvelopeKind.THIRD_PARTY, 200)
        assert outcome.ok is False
        assert outcome.parse_error is True

    def test_2xx_with_html_keeps_raw(self):
        outcome = normalize(b"<html>login</html>", EnvelopeKind.THIRD_PARTY, 200)
        assert outcome.ok is False
        assert outcome.parse_error is True
        assert outcome.raw == "<html>login</html>"

    def test_error_message_is_truncated(self):
        outcome = normalize(b"x" * 2000, EnvelopeKind.THIRD_PARTY, 500)
        assert len(outcome.message) < 600


class TestParseFailures:
    @pytest.mark.parametrize("kind", list(EnvelopeKind))
    def test_invalid_json_keeps_raw_body(self, kind):
        outcome = normalize(b"not json", kind, 200)
        assert outcome.ok is False
        assert outcome.parse_error is True
        assert outcome.message
        assert outcome.raw == "not json"

    @pytest.mark.parametrize("kind", list(EnvelopeKind))
    def test_undecodable_bytes_do_not_raise(self, kind):
        outcome = normalize(b"\xff\xfe\x00", kind, 200)
        assert isinstance(outcome, Outcome)
        assert outcome.ok is False

    @pytest.mark.parametrize("kind", list(EnvelopeKind))
    def test_empty_body(self, kind):
        outcome = normalize(b"", kind, 200)
        assert outcome.ok is False
        assert outcome.data is None

    def test_accepts_str_and_kind_value(self):
        outcome = normalize('{"status": "success", "data": 1}', "legacy")
        assert outcome.ok is True
        assert outcome.data == 1


@pytest.mark.parametrize("kind", list(EnvelopeKind))
@pytest.mark.parametrize("status_code", [None, 200, 204, 400, 500])
@pytest.mark.parametrize(
    "body",
    [
        b'{"status": "success", "message": "", "data": {"x": 1}}',
        b'{"code": 200, "success": true, "msg": "", "data": {"x": 1}}',
        b'{"x": 1}',
        b"null",
        b"{}",
        b"",
    ],
)
def test_failed_outcomes_never_carry_data(kind, status_code, body):
    outcome = normalize(body, kind, status_code)
    assert isinstance(outcome, Outcome)
    if not outcome.ok:
        assert outcome.data is None


class TestOutcome:
    def test_failed_outcome_with_data_rejected(self):
        with pytest.raises(ValueError):
            Outcome(ok=False, data={"x": 1})

    def test_unwrap_success(self):
        assert Outcome(ok=True, data="t1").unwrap() == "t1"

    def test_unwrap_backend_failure(self):
        outcome = normalize(_body({"code": 401, "success": False, "msg": "bad password"}), EnvelopeKind.BLADE, 200)
        with pytest.raises(BackendError) as exc_info:
            outcome.unwrap()
        assert str(exc_info.value) == "bad password"
        assert exc_info.value.code == 401
        assert exc_info.value.status_code == 200

    def test_unwrap_parse_failure(self):
        outcome = normalize(b"{", EnvelopeKind.BLADE, 502)
        with pytest.raises(ParseError) as exc_info:
            outcome.unwrap()
        assert exc_info.value.body == "{"
        assert exc_info.value.status_code == 502

    def test_map_success(self):
        outcome = Outcome(ok=True, message="m", code=200, data=2).map(lambda d: d * 2)
        assert outcome.data == 4
        assert outcome.message == "m"
        assert outcome.code == 200

    def test_map_failure_is_untouched(self):
        failed = Outcome(ok=False, message="no")
        assert failed.map(lambda d: d * 2) is failed


@pytest.mark.parametrize(
    "body",
    [
        b'{"code": 200, "success": true, "msg": "ok", "data": "t42"}',
        b'{"code": 200, "success": true, "msg": "ok", "data": false}',
        b'{"code": 200, "success": true, "msg": "ok"}',
        b'{"code": 200, "success": true, "msg": "ok", "data": null}',
        b'{"code": 401, "success": false, "msg": "no"}',
    ],
)
def test_successful_blade_outcomes_carry_data(body):
    outcome = normalize(body, EnvelopeKind.BLADE, 200)
    if outcome.ok:
        assert outcome.data is not None
