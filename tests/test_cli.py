# tests/test_cli.py

import msgspec
import pytest
from click.testing import CliRunner

from activity_indexer.cli.__main__ import cli

from conftest import ALICE, SUI, TX_TIMESTAMP_MS, make_tx, wire_change

DISPLAY_EVENT = {"type": "0x2::display::DisplayCreated<0x2::kiosk::Kiosk>", "parsedJson": {}}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ["ACTIVITY_WATCHED_ACCOUNT", "ACTIVITY_FROM", "ACTIVITY_TO", "ACTIVITY_SWAP_EVENTS",
                 "ACTIVITY_LOG_DIR", "ACTIVITY_LOG_LEVEL", "ACTIVITY_OLD_FIRST", "ACTIVITY_BY_FROM"]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tx_file(tmp_path, sui_transfer_tx, cetus_swap_tx):
    unknown = make_tx(digest="unknown", balance_changes=[wire_change(ALICE, SUI, -1000)], events=[DISPLAY_EVENT])
    path = tmp_path / "txs.json"
    path.write_bytes(msgspec.json.encode([
        msgspec.to_builtins(tx) for tx in [sui_transfer_tx, cetus_swap_tx, unknown]
    ]))
    return path


def test_classify_file(tx_file):
    result = CliRunner().invoke(cli, ["classify", str(tx_file), ALICE])

    assert result.exit_code == 0, result.output
    assert "classified=2 filtered=0 failed=1" in result.output


def test_classify_report_unknown(tx_file):
    result = CliRunner().invoke(cli, ["classify", str(tx_file), ALICE, "--report-unknown"])

    assert result.exit_code == 0, result.output
    assert "classified=3 filtered=0 failed=0" in result.output


def test_classify_window_filters(tx_file):
    after = str(TX_TIMESTAMP_MS // 1000 + 1)
    result = CliRunner().invoke(cli, ["classify", str(tx_file), ALICE, "--from", after])

    assert result.exit_code == 0, result.output
    assert "classified=0 filtered=3 failed=0" in result.output


def test_classify_reads_account_from_environment(tx_file, monkeypatch):
    monkeypatch.setenv("ACTIVITY_WATCHED_ACCOUNT", ALICE)

    result = CliRunner().invoke(cli, ["classify", str(tx_file)])

    assert result.exit_code == 0, result.output
    assert "classified=2" in result.output


def test_classify_without_account(tx_file):
    result = CliRunner().invoke(cli, ["classify", str(tx_file)])

    assert result.exit_code != 0
    assert "ACTIVITY_WATCHED_ACCOUNT" in result.output


def test_classify_empty_window(tx_file):
    result = CliRunner().invoke(cli, ["classify", str(tx_file), ALICE, "--from", "200", "--to", "100"])

    assert result.exit_code != 0
    assert "Time window is empty" in result.output


def test_classify_unreadable_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    result = CliRunner().invoke(cli, ["classify", str(path), ALICE])

    assert result.exit_code != 0
    assert "Cannot read transactions" in result.output


def test_fetch_help():
    result = CliRunner().invoke(cli, ["fetch", "--help"])

    assert result.exit_code == 0
    assert "--old-first" in result.output
    assert "--direction" in result.output
