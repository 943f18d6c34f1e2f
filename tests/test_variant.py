import pytest

from stdplus.variant import variant_eq_fuzzy, variant_eq_strict


@pytest.mark.parametrize(
    ("lhs", "rhs", "expected"),
    [
        (1, 1, True),
        (1, 1.0, True),
        (1.0, 1, True),
        (1.0, 1.0, True),
        ("1", 1, False),
        ("1", 1.0, False),
        ("1", "1", True),
        ("1", 1, False),
    ],
)
def test_fuzzy(lhs, rhs, expected):
    assert variant_eq_fuzzy(lhs, rhs) is expected


@pytest.mark.parametrize(
    ("lhs", "rhs", "expected"),
    [
        (1, 1, True),
        (1, 1.0, False),
        (1.0, 1, False),
        (1.0, 1.0, True),
        ("1", 1, False),
        ("1", 1.0, False),
        ("1", "1", True),
    ],
)
def test_strict(lhs, rhs, expected):
    assert variant_eq_strict(lhs, rhs) is expected


def test_fuzzy_unequal_values():
    assert variant_eq_fuzzy(1, 2) is False
    assert variant_eq_fuzzy("a", "b") is False


def test_strict_distinguishes_bool_from_int():
    assert variant_eq_strict(True, 1) is False
    assert variant_eq_fuzzy(True, 1) is True