"""
Тесты для codec: decode / decode_lenient / encode / check_response / Codec

Покрывает:
- STRICT политику: некорректный временной литерал прерывает декодирование
- LENIENT политику: поле → None + DecodeWarning с полным путём
- Структурные ошибки при любой политике
- encode для моделей, дат и списков моделей
- Обработку error envelope и non-2xx ответов
- Copy-out семантику и безопасность конкурентного использования
"""

import json
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, timezone

import pytest

from eventbrite_types import (
    APIError,
    Attendee,
    Codec,
    Date,
    DateTime,
    DecodeError,
    DecodePolicy,
    DecodeResult,
    Error,
    Event,
    check_response,
    decode,
    decode_error,
    decode_lenient,
    encode,
)
from eventbrite_types.config import Settings


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def bad_temporal_attendee() -> bytes:
    """Attendee с двумя некорректными временными литералами."""
    return json.dumps(
        {
            "id": "1",
            "created": "2018-05-01T10:00:00Z",
            "profile": {"name": "Alex", "birth_date": "2023-13-40"},
            "barcodes": [
                {"barcode": "b1", "created": "2018-05-01 10:00:00"},
                {"barcode": "b2", "created": "2018-05-01T10:00:00Z"},
            ],
            "event_id": "44444",
        }
    ).encode("utf-8")


# =============================================================================
# STRICT DECODE
# =============================================================================


class TestStrictDecode:
    """Тесты для decode (STRICT)"""

    def test_malformed_date_is_error(self) -> None:
        """Литерал 2023-13-40 → ошибка декодирования, не тихо неверная дата."""
        with pytest.raises(DecodeError) as exc_info:
            decode(b'{"profile": {"birth_date": "2023-13-40"}}', Attendee)

        exc = exc_info.value
        assert exc.path == "profile.birth_date"
        assert exc.model == "Attendee"
        assert exc.errors[0]["type"] == "temporal_format"
        assert "2023-13-40" in str(exc)

    def test_first_error_path(self, bad_temporal_attendee: bytes) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode(bad_temporal_attendee, Attendee)
        assert exc_info.value.path == "profile.birth_date"
        assert len(exc_info.value.errors) == 2

    def test_non_string_temporal_is_type_error(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode(b'{"profile": {"birth_date": 123}}', Attendee)

        assert exc_info.value.errors[0]["type"] == "temporal_type"
        assert "int" in str(exc_info.value)

    def test_invalid_json(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode(b'{"id": ', Attendee)
        assert exc_info.value.path == ""
        assert exc_info.value.errors[0]["type"] == "json_invalid"

    def test_scalar_document(self) -> None:
        with pytest.raises(DecodeError):
            decode(b'"attendee"', Attendee)

    def test_decode_str_input(self) -> None:
        assert decode('{"id": "1"}', Attendee).id == "1"

    def test_decode_temporal_types(self) -> None:
        assert decode(b'"2023-05-01"', Date) == date(2023, 5, 1)
        assert decode(b'"2023-05-01T14:30:00Z"', DateTime) == datetime(
            2023, 5, 1, 14, 30, tzinfo=timezone.utc
        )

    def test_decode_temporal_type_malformed(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode(b'"2023-13-40"', Date)
        assert exc_info.value.path == ""

    def test_decode_list_of_models(self) -> None:
        attendees = decode(b'[{"id": "1"}, {"id": "2"}]', tuple[Attendee, ...])
        assert [a.id for a in attendees] == ["1", "2"]

    def test_copy_out(self) -> None:
        """Значение не держит ссылок на входной буфер."""
        buffer = bytearray(b'{"id": "1", "status": "Attending"}')
        attendee = decode(buffer, Attendee)
        buffer[:] = b'{"id": "2", "status": "Cancelled"}'

        assert attendee.id == "1"
        assert attendee.status == "Attending"

    def test_concurrent_decode(self) -> None:
        payload = b'{"id": "1", "created": "2018-05-01T10:00:00Z", "barcodes": []}'
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: decode(payload, Attendee), range(64)))
        assert all(r == results[0] for r in results)


# =============================================================================
# LENIENT DECODE
# =============================================================================


class TestLenientDecode:
    """Тесты для decode_lenient"""

    def test_degrades_bad_fields(self, bad_temporal_attendee: bytes) -> None:
        result = decode_lenient(bad_temporal_attendee, Attendee)

        attendee = result.value
        assert attendee.profile.birth_date is None
        assert attendee.profile.name == "Alex"
        assert attendee.barcodes[0].created is None
        assert attendee.barcodes[0].barcode == "b1"
        assert attendee.barcodes[1].created == datetime(2018, 5, 1, 10, 0, tzinfo=timezone.utc)
        assert attendee.event_id == "44444"

    def test_collects_warnings(self, bad_temporal_attendee: bytes) -> None:
        result = decode_lenient(bad_temporal_attendee, Attendee)

        assert result.degraded is True
        assert [w.path for w in result.warnings] == ["profile.birth_date", "barcodes.0.created"]
        assert result.warnings[0].value == "2023-13-40"
        assert result.warnings[1].value == "2018-05-01 10:00:00"
        assert all(w.reason for w in result.warnings)

    def test_clean_payload_has_no_warnings(self) -> None:
        result = decode_lenient(b'{"id": "1", "created": "2018-05-01T10:00:00Z"}', Attendee)
        assert result.warnings == ()
        assert result.degraded is False
        assert result.value.id == "1"

    def test_structural_errors_still_abort(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_lenient(b'{"profile": {"birth_date": "2023-13-40"}, "barcodes": "x"}', Attendee)
        assert exc_info.value.path == "profile.birth_date"

    def test_non_string_temporal_aborts(self) -> None:
        """Число вместо строки даты является ошибкой формы, а не литерала."""
        with pytest.raises(DecodeError) as exc_info:
            decode_lenient(b'{"profile": {"birth_date": 123}}', Attendee)

        assert exc_info.value.path == "profile.birth_date"
        assert exc_info.value.errors[0]["type"] == "temporal_type"

    def test_non_string_datetime_aborts(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_lenient(b'{"created": 1525168800, "changed": "yesterday"}', Event)
        assert exc_info.value.path == "created"

    def test_invalid_json_aborts(self) -> None:
        with pytest.raises(DecodeError):
            decode_lenient(b"{", Attendee)

    def test_top_level_temporal_aborts(self) -> None:
        """Без охватывающей сущности деградировать нечего."""
        with pytest.raises(DecodeError):
            decode_lenient(b'"2023-13-40"', Date)

    def test_degraded_value_encodes_null(self) -> None:
        result = decode_lenient(b'{"created": "yesterday"}', Event)
        assert json.loads(encode(result.value)) == {"created": None}


# =============================================================================
# ENCODE
# =============================================================================


class TestEncode:
    """Тесты для encode"""

    def test_model_emits_only_set_fields(self) -> None:
        attendee = Attendee(id="1", event_id="44444")
        assert json.loads(encode(attendee)) == {"id": "1", "event_id": "44444"}

    def test_constructed_temporal_fields(self) -> None:
        attendee = Attendee(created=datetime(2023, 5, 1, 14, 30, tzinfo=timezone.utc))
        assert json.loads(encode(attendee)) == {"created": "2023-05-01T14:30:00Z"}

    def test_date_and_datetime(self) -> None:
        assert encode(date(2023, 5, 1)) == b'"2023-05-01"'
        assert encode(datetime(2023, 5, 1, 14, 30, tzinfo=timezone.utc)) == b'"2023-05-01T14:30:00Z"'

    def test_list_of_models(self) -> None:
        encoded = encode([Attendee(id="1"), Attendee(id="2")])
        assert json.loads(encoded) == [{"id": "1"}, {"id": "2"}]

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError, match="cannot encode"):
            encode(object())

    def test_bytes_round_trip(self) -> None:
        raw = b'{"id":"1","created":"2018-05-01T10:00:00Z","profile":{"birth_date":"1985-07-14"}}'
        assert encode(decode(raw, Attendee)) == raw


# =============================================================================
# API ERRORS
# =============================================================================


class TestApiErrors:
    """Тесты для decode_error и check_response"""

    def test_decode_error(self) -> None:
        error = decode_error(
            b'{"error":"VENUE_AND_ONLINE","error_description":"bad combo","status_code":400}'
        )
        assert isinstance(error, Error)
        assert error.message == "Eventbrite API: [Status code - 400] bad combo"

    def test_success_status(self) -> None:
        assert check_response(200, b'{"id": "1"}') is None
        assert check_response(204, b"") is None

    def test_error_status_raises(self) -> None:
        body = b'{"error":"NOT_FOUND","error_description":"The event does not exist.","status_code":404}'
        with pytest.raises(APIError) as exc_info:
            check_response(404, body)

        assert exc_info.value.key == "NOT_FOUND"
        assert exc_info.value.status_code == 404
        assert str(exc_info.value) == "Eventbrite API: [Status code - 404] The event does not exist."

    def test_status_code_from_http(self) -> None:
        with pytest.raises(APIError) as exc_info:
            check_response(429, b'{"error":"HIT_RATE_LIMIT","error_description":"slow down"}')
        assert exc_info.value.status_code == 429
        assert str(exc_info.value) == "Eventbrite API: [Status code - 429] slow down"

    def test_non_json_error_body(self) -> None:
        with pytest.raises(DecodeError):
            check_response(502, b"<html>Bad Gateway</html>")


# =============================================================================
# CODEC
# =============================================================================


class TestCodec:
    """Тесты для Codec с фиксированной политикой"""

    def test_default_is_strict(self, bad_temporal_attendee: bytes) -> None:
        codec = Codec()
        assert codec.policy is DecodePolicy.STRICT
        with pytest.raises(DecodeError):
            codec.decode(bad_temporal_attendee, Attendee)

    def test_strict_returns_result(self) -> None:
        result = Codec().decode(b'{"id": "1"}', Attendee)
        assert isinstance(result, DecodeResult)
        assert result.value.id == "1"
        assert result.warnings == ()

    def test_lenient(self, bad_temporal_attendee: bytes) -> None:
        codec = Codec(policy="lenient")
        result = codec.decode(bad_temporal_attendee, Attendee)
        assert codec.policy is DecodePolicy.LENIENT
        assert len(result.warnings) == 2

    def test_from_settings(self) -> None:
        codec = Codec.from_settings(Settings(decode_policy=DecodePolicy.LENIENT))
        assert codec.policy is DecodePolicy.LENIENT

    def test_encode_and_check_response(self) -> None:
        codec = Codec()
        assert codec.encode(Attendee(id="1")) == b'{"id":"1"}'
        with pytest.raises(APIError):
            codec.check_response(400, b'{"error":"ARGUMENTS_ERROR","status_code":400}')

    def test_invalid_policy(self) -> None:
        with pytest.raises(ValueError):
            Codec(policy="sloppy")
