import pytest

from contact_relay.core.exceptions import SubmissionRejected
from contact_relay.models.contact import (
    INVALID_DATA_FORMAT,
    MESSAGE_TOO_LONG,
    MESSAGE_TOO_SHORT,
    NAME_TOO_SHORT,
    REQUIRED_FIELDS_MISSING,
    validate_submission,
)


def rejection(payload, strict=True):
    with pytest.raises(SubmissionRejected) as exc_info:
        validate_submission(payload, strict=strict)
    return exc_info.value.reason


@pytest.mark.parametrize("strict", [True, False])
@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"name": "Jordan"},
        {"message": "Please contact me about pricing."},
        {"name": "", "message": "Please contact me about pricing."},
        {"name": "Jordan", "message": ""},
        {"name": None, "message": None},
    ],
)
def test_missing_fields_rejected(payload, strict):
    assert rejection(payload, strict) == REQUIRED_FIELDS_MISSING


def test_non_object_payload_counts_as_missing():
    assert rejection(["Jordan", "hello"]) == REQUIRED_FIELDS_MISSING


def test_strict_rejects_non_text_fields():
    assert rejection({"name": 42, "message": "Please contact me about pricing."}) == INVALID_DATA_FORMAT
    assert rejection({"name": "Jordan", "message": ["a", "b"]}) == INVALID_DATA_FORMAT


def test_missing_check_wins_over_format_check():
    assert rejection({"name": 42, "message": ""}) == REQUIRED_FIELDS_MISSING


def test_strict_name_too_short_after_trim():
    assert rejection({"name": "  J  ", "message": "Please contact me about pricing."}) == NAME_TOO_SHORT


def test_strict_message_too_short_after_trim():
    assert rejection({"name": "Jo", "message": "short"}) == MESSAGE_TOO_SHORT
    assert rejection({"name": "Jo", "message": "   123456789   "}) == MESSAGE_TOO_SHORT


def test_name_check_wins_over_message_check():
    assert rejection({"name": "J", "message": "short"}) == NAME_TOO_SHORT


@pytest.mark.parametrize("strict", [True, False])
def test_message_too_long(strict):
    assert rejection({"name": "Jordan", "message": "x" * 1001}, strict) == MESSAGE_TOO_LONG


def test_message_at_limit_accepted():
    submission = validate_submission({"name": "Jordan", "message": "x" * 1000})
    assert len(submission.message) == 1000


def test_length_limit_uses_untrimmed_message():
    assert rejection({"name": "Jordan", "message": "x" * 995 + " " * 10}) == MESSAGE_TOO_LONG


def test_valid_submission_is_trimmed():
    submission = validate_submission(
        {"name": "  Jordan ", "message": " Please contact me about pricing.\n", "phone": " 555-1234 "}
    )
    assert submission.name == "Jordan"
    assert submission.message == "Please contact me about pricing."
    assert submission.phone == "555-1234"


@pytest.mark.parametrize("phone", [None, "", "   "])
def test_blank_phone_becomes_none(phone):
    submission = validate_submission({"name": "Jordan", "message": "Please contact me about pricing.", "phone": phone})
    assert submission.phone is None


def test_numeric_phone_converted_to_text():
    submission = validate_submission({"name": "Jordan", "message": "Please contact me about pricing.", "phone": 5551234})
    assert submission.phone == "5551234"


def test_permissive_skips_minimum_lengths():
    submission = validate_submission({"name": "J", "message": "hi"}, strict=False)
    assert submission.name == "J"
    assert submission.message == "hi"


def test_permissive_converts_non_text_values():
    submission = validate_submission({"name": 42, "message": 12345}, strict=False)
    assert submission.name == "42"
    assert submission.message == "12345"


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "   ", "message": "Please contact me about pricing."},
        {"name": "Jordan", "message": " \n\t "},
    ],
)
def test_permissive_rejects_whitespace_only_fields(payload):
    assert rejection(payload, strict=False) == REQUIRED_FIELDS_MISSING
