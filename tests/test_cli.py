import json

from click.testing import CliRunner

from coordsanitizer.cli import main


def run(*args):
    return CliRunner().invoke(main, list(args))


def test_sanitize_default():
    result = run("sanitize", "12h 00m 00s, +12° 00' 00\"")
    assert result.exit_code == 0
    assert result.output.strip() == "12 00 00.000, +12 00 00.000"


def test_sanitize_joins_words():
    result = run("sanitize", "12:00:00,", "+12:00:00", "-f", "decimal", "-p", "2")
    assert result.exit_code == 0
    assert result.output.strip() == "12.00, 12.00"


def test_sanitize_object_name():
    result = run("sanitize", "M31")
    assert result.exit_code == 0
    assert result.output.strip() == "M31"


def test_sanitize_invalid_exits_nonzero():
    result = run("sanitize", "25h 00m 00s, +00° 00' 00\"")
    assert result.exit_code == 1
    assert "RA out of range" in result.output


def test_sanitize_no_validate_and_preset():
    assert run("sanitize", "--no-validate", "25h 00m 00s, +00° 00' 00\"").exit_code == 0
    assert run("sanitize", "--preset", "loose", "25h 00m 00s, +00° 00' 00\"").exit_code == 0


def test_sanitize_json():
    result = run("sanitize", "--json", "16 37 13, -00 58 20")
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["valid"]
    assert payload["coordinates"] == "16 37 13.000, -00 58 20.000"
    assert payload["metadata"]["dec"]["decimal"] < 0


def test_sanitize_bad_precision():
    result = run("sanitize", "-p", "-3", "12:00:00, +12:00:00")
    assert result.exit_code == 2
    assert "precision must be non-negative" in result.output
    assert isinstance(result.exception, SystemExit)


def test_formats():
    result = run("formats")
    assert result.exit_code == 0
    for name in ("aladin", "decimal", "hms-dms", "loose", "strict"):
        assert name in result.output


def test_batch(tmp_path):
    path = tmp_path / "targets.csv"
    path.write_text("pos\n\"12:00:00, +45:00:00\"\nM31\n", encoding="utf-8")
    result = run("batch", str(path), "--column", "pos")
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines == ["12:00:00, +45:00:00\t12 00 00.000, +45 00 00.000", "M31\tM31"]


def test_batch_missing_column(tmp_path):
    path = tmp_path / "targets.csv"
    path.write_text("pos\nM31\n", encoding="utf-8")
    result = run("batch", str(path), "--column", "ra")
    assert result.exit_code == 1
