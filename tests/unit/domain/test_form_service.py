"""Unit tests for helperkit.domain.form_service."""

from enum import Enum

import pytest

from helperkit.domain import form_service
from helperkit.domain.validation import Violation


class Status(Enum):
    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"
    DELETED = "DELETED"


class Channel(Enum):
    EMAIL = "email"
    SMS = "sms"


def test_trim():
    assert form_service.trim("  hello \n") == "hello"
    assert form_service.trim("\0hello\0") == "hello"
    assert form_service.trim("hello\0", delete_zero=False) == "hello\0"
    assert form_service.trim("   ") == ""
    assert form_service.trim("   ", return_none_if_empty=True) is None
    assert form_service.trim(None) is None


class TestParseArray:
    def test_split_and_filter(self):
        assert form_service.parse_array("a,,b,0") == ["a", "b"]

    def test_keep_empty_items(self):
        assert form_service.parse_array("a,,b", filter_empty=False) == ["a", "", "b"]

    def test_custom_separator(self):
        assert form_service.parse_array("a;b", separator=";") == ["a", "b"]

    def test_scalar_and_none(self):
        assert form_service.parse_array(5) == [5]
        assert form_service.parse_array("a,b", separator=None) == ["a,b"]
        assert form_service.parse_array(None) == []

    def test_lists_are_filtered(self):
        assert form_service.parse_array(["x", "", None, "y"]) == ["x", "y"]

    def test_max_size(self):
        with pytest.raises(ValueError, match="exceeds maximum allowed size"):
            form_service.parse_array("a,b,c", max_size=2)
        assert form_service.parse_array("a,b,c", max_size=0) == ["a", "b", "c"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Yes", True),
        (" on ", True),
        ("1", True),
        ("true", True),
        ("off", False),
        ("no", False),
        ("", False),
        ("maybe", None),
        (1, True),
        (0, False),
        (2, None),
        (True, True),
        (None, None),
        (1.5, None),
    ],
)
def test_parse_boolean(value, expected):
    assert form_service.parse_boolean(value) is expected


@pytest.mark.parametrize(
    ("value", "kwargs", "expected"),
    [
        ("42", {}, 42),
        (" 42 ", {}, 42),
        ("3.7", {}, 3),
        (7, {}, 7),
        ("abc", {}, None),
        ("", {}, None),
        (None, {}, None),
        (True, {}, None),
        ("inf", {}, None),
        ("5", {"min_value": 10}, None),
        ("10", {"min_value": 10, "max_value": 10}, 10),
        ("11", {"max_value": 10}, None),
    ],
)
def test_parse_integer(value, kwargs, expected):
    assert form_service.parse_integer(value, **kwargs) == expected


def test_parse_float():
    assert form_service.parse_float("3.5") == 3.5
    assert form_service.parse_float("1e3") == 1000.0
    assert isinstance(form_service.parse_float("2"), float)
    assert form_service.parse_float("nan") is None
    assert form_service.parse_float("11", max_value=10) is None
    assert form_service.parse_float(float("inf")) is None


class TestSanitizeHtml:
    def test_strips_tags_and_dangerous_content(self):
        dirty = "<p>Hello <script>alert(1)</script><b>world</b></p>"
        assert form_service.sanitize_html(dirty) == "Hello world"

    def test_keeps_basic_formatting(self):
        dirty = '<div><p>Hello <b>world</b> <a href="https://evil.test">link</a></p></div>'
        assert form_service.sanitize_html(dirty, allow_basic_formatting=True) == "<p>Hello <b>world</b> link</p>"

    def test_drops_styles_and_iframes(self):
        dirty = "<style>p{}</style>text<iframe src='x'>frame</iframe>"
        assert form_service.sanitize_html(dirty, allow_basic_formatting=True) == "text"

    def test_plain_text_and_none(self):
        assert form_service.sanitize_html("just text") == "just text"
        assert form_service.sanitize_html(None) is None


class TestParseEnum:
    def test_upper_case_lookup(self):
        assert form_service.parse_enum(Status, "active") is Status.ACTIVE

    def test_lower_case_lookup(self):
        assert form_service.parse_enum(Channel, "SMS", upper_case=False) is Channel.SMS

    def test_unknown_value(self):
        assert form_service.parse_enum(Status, "purged") is None
        assert form_service.parse_enum(Status, None) is None

    def test_not_an_enum(self):
        with pytest.raises(TypeError, match="is not a valid Enum"):
            form_service.parse_enum(dict, "x")


class TestParseEnumList:
    def test_drops_unknown_values(self):
        assert form_service.parse_enum_list("ACTIVE,unknown,DELETED", Status) == [Status.ACTIVE, Status.DELETED]

    def test_allowed_values(self):
        result = form_service.parse_enum_list(["ACTIVE", "DELETED"], Status, allowed_values=[Status.ACTIVE])
        assert result == [Status.ACTIVE]

    def test_parse_function(self):
        result = form_service.parse_enum_list(
            "active|archived|nope",
            Status,
            parse_function=lambda value: form_service.parse_enum(Status, value),
            separator="|",
        )
        assert result == [Status.ACTIVE, Status.ARCHIVED]


def test_get_error_messages():
    violations = [
        Violation("first_name.invalid", property_path="firstName"),
        Violation("post_code.invalid", property_path="address.zipCode"),
    ]
    messages = form_service.get_error_messages(
        violations, {"captcha": ("captcha", "captcha.invalid"), "global": "form.expired"}
    )

    assert messages == {
        "first_name": "first_name.invalid",
        "address.zipCode": "post_code.invalid",
        "captcha": "captcha.invalid",
        "global": "form.expired",
    }


def test_get_error_messages_without_input():
    assert form_service.get_error_messages(None) == {}
