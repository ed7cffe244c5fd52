import pytest

from coordsanitizer.classify import (
    is_canonical, is_object_name, looks_like_coordinates, match_catalog,
)
from coordsanitizer.config import OutputFormat


def test_canonical_aladin():
    assert is_canonical("12 34 56.780, +12 34 56.780", OutputFormat.ALADIN)
    assert is_canonical("16 37 13.000, -00 58 20.000", "aladin")
    assert is_canonical("00 00 00.000, 00 00 00.000", "aladin")


@pytest.mark.parametrize("text", [
    "12 34 56.78, +12 34 56.78",      # two fractional digits
    "12 34 56.780,+12 34 56.780",     # separator without space
    "1 34 56.780, +12 34 56.780",     # unpadded hour
    "12  34 56.780, +12 34 56.780",   # double space
])
def test_not_canonical_aladin(text):
    assert not is_canonical(text, OutputFormat.ALADIN)


def test_only_aladin_has_a_canonical_grammar():
    assert not is_canonical("12.500000, -45.750000", OutputFormat.DECIMAL)
    assert not is_canonical("12 34 56.780, +12 34 56.780", OutputFormat.HMS_DMS)


@pytest.mark.parametrize("text, shape", [
    ("M31", "messier"),
    ("m 42", "messier"),
    ("NGC 1234", "ngc-ic-ugc-pgc"),
    ("NGC1234", "ngc-ic-ugc-pgc"),
    ("IC 1396", "ngc-ic-ugc-pgc"),
    ("UGC 12158", "ngc-ic-ugc-pgc"),
    ("HD 209458", "hip-hd-sao"),
    ("HIP 27989", "hip-hd-sao"),
    ("SAO 123456", "hip-hd-sao"),
    ("Sh2-155", "sharpless"),
    ("Barnard33", "barnard"),
    ("PK 064+05.1", "planetary-nebula"),
    ("LBN 437", "lynds-bright"),
    ("ALPHA CENTAURI", "two-word-name"),
    ("51 ERI", "number-name"),
    ("51 Eri", "number-name"),
])
def test_catalog_shapes(text, shape):
    assert match_catalog(text) == shape


def test_single_letter_name_matches_a_name_shape():
    assert is_object_name("R AND")
    assert is_object_name("R And")


@pytest.mark.parametrize("text", ["Polaris", "12h 34m 56s", "12.5,-45.75", ""])
def test_non_catalog_text(text):
    assert match_catalog(text) is None


@pytest.mark.parametrize("text", [
    "12h 34m 56s,+12d 34' 56\"",
    "12:34:56",
    "+45.5",
    "12.5,45.75",
    "56s",
    "RA 12.5",
    "dec 45",
    "12d30",
])
def test_looks_like_coordinates(text):
    assert looks_like_coordinates(text)


@pytest.mark.parametrize("text", [
    "Polaris",
    "Andromeda Galaxy",
    "Invalid input with no coordinates",
    "NGC 1234",
    "M 42",
    "Sh2-155",
])
def test_does_not_look_like_coordinates(text):
    assert not looks_like_coordinates(text)
