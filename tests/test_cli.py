"""Tests for the command-line interface."""

import json

import pytest

from brew_advisor.cli import main


def test_cli_fallback_json(capsys):
    code = main(["1", "3", "--no-ai", "--json"])

    body = json.loads(capsys.readouterr().out)
    assert code == 0
    assert body["success"] is True
    assert body["fallbackUsed"] is True
    assert body["data"]["grindSize"] == "fine"


def test_cli_formatted_output(capsys):
    code = main(["3", "1", "--no-ai"])

    out = capsys.readouterr().out
    assert code == 0
    assert "205°F / 96°C" in out
    assert "4:30" in out
    assert "fallback table" in out


def test_cli_invalid_selection(capsys):
    code = main(["99", "1", "--no-ai"])

    assert code == 1
    assert "Invalid bean or machine selection" in capsys.readouterr().err


def test_cli_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "Barista Express" in out
    assert "Guatemala" in out


def test_cli_requires_ids():
    with pytest.raises(SystemExit):
        main(["1"])
