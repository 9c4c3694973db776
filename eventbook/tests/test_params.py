import pytest

from eventbook.routes.params import parse_id


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("7", 7),
        (" 7 ", 7),
        ("7.0", 7),
        ("+7", 7),
        ("1e2", 100),
        ("0x10", 16),
        ("0b11", 3),
        ("abc", None),
        ("1.5", None),
        ("", None),
        ("NaN", None),
        ("nan", None),
        ("Infinity", None),
        ("inf", None),
        ("1e300", None),
        ("1_0", None),
        ("0x1_0", None),
        ("-0x10", None),
    ],
)
def test_parse_id(raw, expected):
    """Test path ids follow JS Number() parsing and must be integral."""
    assert parse_id(raw) == expected
