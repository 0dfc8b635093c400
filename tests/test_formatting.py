import pytest

from ledbench.formatting import format_two_places


def test_documented_example_truncates_to_two_places():
    assert format_two_places(-23.4578) == "-23.45"


def test_zero():
    assert format_two_places(0.0) == "0.0"


def test_single_trailing_zero_kept():
    assert format_two_places(20.5) == "20.5"


@pytest.mark.parametrize("number", [1, 7, 23, 456, 1234])
def test_whole_numbers_get_single_zero_fraction(number):
    assert format_two_places(float(number)) == f"{number}.0"


@pytest.mark.parametrize("whole, hundredths", [(12, 25), (12, 75), (3, 25)])
def test_exact_fractions(whole, hundredths):
    value = whole + hundredths / 100
    assert format_two_places(value) == f"{whole}.{hundredths}"


@pytest.mark.parametrize("value", [-1.5, -0.25, 0.25, 3.75, -99.75])
def test_sign_matches_input(value):
    text = format_two_places(value)
    assert text.startswith("-") == (value < 0)
    assert text.count(".") == 1


@pytest.mark.parametrize("value", [1.25, 17.75, 33.5])
def test_negation_only_adds_minus(value):
    assert format_two_places(-value) == "-" + format_two_places(value)


@pytest.mark.parametrize("value", [70000.0, -65536.0, float("nan")])
def test_unrepresentable_values_rejected(value):
    with pytest.raises(ValueError):
        format_two_places(value)