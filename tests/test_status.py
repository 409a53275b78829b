"""Tests for StatusCode."""

from request_logging import StatusCode


def test_ok_is_zero():
    assert StatusCode.OK == 0
    assert StatusCode.OK.class_name == "Ok"


def test_class_names():
    assert StatusCode.NOT_FOUND.class_name == "NotFound"
    assert StatusCode.INVALID_ARGUMENT.class_name == "InvalidArgument"
    assert StatusCode.UNAUTHENTICATED.class_name == "Unauthenticated"


def test_all_canonical_codes_present():
    assert [c.value for c in StatusCode] == list(range(17))
