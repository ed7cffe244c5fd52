import numpy as np
import pytest

from coordsanitizer.convert import (
    decimal_to_dms, decimal_to_hms, dms_to_decimal, hms_to_decimal,
    round_sexagesimal, validate_dec, validate_ra,
)


def test_hms_to_decimal():
    assert hms_to_decimal(12, 30, 0) == pytest.approx(12.5)
    assert hms_to_decimal(0, 0, 36) == pytest.approx(0.01)


def test_decimal_to_hms():
    hours, minutes, seconds, sign = decimal_to_hms(12.5)
    assert (hours, minutes, sign) == (12, 30, 1)
    assert seconds == pytest.approx(0.0, abs=1e-9)


def test_dms_sign_from_degrees():
    assert dms_to_decimal(-12, 30, 0) == pytest.approx(-12.5)
    assert dms_to_decimal(12, 30, 0) == pytest.approx(12.5)


def test_dms_explicit_sign_on_zero_degrees():
    value = dms_to_decimal(0, 58, 20, sign=-1)
    assert value < 0
    assert value == pytest.approx(-(58 / 60 + 20 / 3600))


def test_decimal_to_dms_negative_near_zero():
    degrees, minutes, seconds, sign = decimal_to_dms(-0.5)
    assert degrees == 0
    assert minutes == 30
    assert sign == -1
    assert seconds == pytest.approx(0.0, abs=1e-9)


def test_decimal_to_dms_minutes_and_seconds_are_magnitudes():
    degrees, minutes, seconds, sign = decimal_to_dms(-45.75)
    assert degrees == -45
    assert minutes == 45
    assert seconds >= 0
    assert sign == -1


@pytest.mark.parametrize("value", np.linspace(0, 24, 97, endpoint=False))
def test_hms_round_trip(value):
    hours, minutes, seconds, _ = decimal_to_hms(value)
    assert hms_to_decimal(hours, minutes, seconds) == pytest.approx(value, abs=1e-9)


@pytest.mark.parametrize("value", np.concatenate([
    np.linspace(-90, 90, 73),
    [-0.999, -0.5, -0.0001, 0.0001, 0.5],
]))
def test_dms_round_trip(value):
    degrees, minutes, seconds, sign = decimal_to_dms(value)
    assert dms_to_decimal(degrees, minutes, seconds, sign=sign) == pytest.approx(value, abs=1e-9)


def test_round_sexagesimal_carries():
    assert round_sexagesimal(12, 59, 59.9996) == (13, 0, 0.0)
    assert round_sexagesimal(12, 34, 59.9996) == (12, 35, 0.0)
    assert round_sexagesimal(12, 34, 56.78) == (12, 34, 56.78)


def test_round_sexagesimal_carry_keeps_negative_sign_on_zero():
    assert round_sexagesimal(0, 59, 59.9999, sign=-1) == (-1, 0, 0.0)
    assert round_sexagesimal(-5, 59, 59.9999, sign=-1) == (-6, 0, 0.0)


@pytest.mark.parametrize("hours", [0, 12, 23.9999])
def test_validate_ra_ok(hours):
    assert validate_ra(hours) is None


@pytest.mark.parametrize("hours", [-0.1, 24, 25])
def test_validate_ra_out_of_range(hours):
    error = validate_ra(hours)
    assert error.startswith("RA out of range")
    assert "0-24 hours" in error


@pytest.mark.parametrize("degrees", [-90, 0, 90])
def test_validate_dec_ok(degrees):
    assert validate_dec(degrees) is None


@pytest.mark.parametrize("degrees", [-90.001, 95])
def test_validate_dec_out_of_range(degrees):
    error = validate_dec(degrees)
    assert error.startswith("DEC out of range")
    assert str(degrees) in error


def test_round_sexagesimal_wraps_carry_into_24h():
    assert round_sexagesimal(23, 59, 59.9999, wrap=24) == (0, 0, 0.0)
    assert round_sexagesimal(23, 59, 59.9999) == (24, 0, 0.0)
    assert round_sexagesimal(25, 0, 0.0, wrap=24) == (25, 0, 0.0)
