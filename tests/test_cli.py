"""
Tests for the CLI module.
"""

import json
import os
from unittest.mock import patch

import pytest

from chargex.cli import main, number_length
from chargex.config import Config
from chargex.model import ChargeEntry


@pytest.fixture(autouse=True)
def default_config():
    """Run every command with the default configuration."""
    with patch("chargex.cli.configure_logging"):
        with patch("chargex.cli.load_config", side_effect=lambda path: Config()):
            yield


def test_format(capsys):
    """Test the format command."""
    assert main(["format", "battery\nlittering"]) == 0

    out = capsys.readouterr().out
    assert out == "1. Battery\n  - Statute: § 242 PC\n2. Littering\n"


def test_format_from_file(capsys, temp_dir):
    """Test the format command reading a file."""
    path = os.path.join(temp_dir, "charges.txt")
    with open(path, "w", encoding="utf-8") as f:
        f.write("speeding, resisting arrest\n")

    assert main(["format", "--in", path]) == 0

    out = capsys.readouterr().out
    assert "2. Resisting Arrest\n  - Statute: § 69(A)/148(A) PC" in out


def test_format_unnumbered(capsys):
    """Test the format command without numbering."""
    assert main(["format", "--unnumbered", "arson"]) == 0

    assert capsys.readouterr().out == "Arson\n  - Statute: § 451 PC\n"


@patch("chargex.cli.write_outputs")
def test_format_outputs(mock_write_outputs, capsys):
    """Test the format command passes entries and output paths to the writers."""
    assert main(["format", "battery", "--json", "out.json", "--csv", "out.csv"]) == 0

    mock_write_outputs.assert_called_once()
    entries, config = mock_write_outputs.call_args[0]
    assert entries == (ChargeEntry(1, "1. Battery", entries[0].statute),)
    assert entries[0].statute.section == "242"
    assert config.output.json_path == "out.json"
    assert config.output.csv_path == "out.csv"


def test_format_empty(capsys):
    """Test the format command with no charges."""
    assert main(["format", "   "]) == 1
    assert capsys.readouterr().out == ""


def test_violations(capsys):
    """Test the violations command."""
    assert main(["violations", "speeding\nlittering"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"violation": "2235[012] CVC - Speeding", "type": "I", "correctable": False},
        "Littering",
    ]


def test_number(capsys):
    """Test the number command."""
    assert main(["number"]) == 0

    number = int(capsys.readouterr().out)
    assert 0 <= number <= 99999


def test_number_booking_with_exclusions(capsys):
    """Test the number command with excluded numbers."""
    assert main(["number", "--kind", "booking", "--exclude", "0001", "2"]) == 0

    number = int(capsys.readouterr().out)
    assert 0 <= number <= 9999
    assert number not in (1, 2)


@patch("chargex.cli.allocate_number", return_value=31337)
def test_number_for_guild(mock_allocate_number, capsys):
    """Test the number command looks up a guild's used numbers."""
    assert main(["number", "--guild", "guild-1"]) == 0

    assert capsys.readouterr().out == "31337\n"
    assert mock_allocate_number.call_args[0][:3] == ("guild-1", "citation", 5)


@patch("chargex.cli.classify_charges", side_effect=Exception("Test error"))
def test_error(mock_classify_charges):
    """Test CLI error handling."""
    assert main(["format", "battery"]) == 1


def test_no_command():
    """Test running without a command."""
    assert main([]) == 1


def test_number_length():
    """Test the configured number lengths."""
    config = Config()
    assert number_length("citation", config) == 5
    assert number_length("booking", config) == 4
