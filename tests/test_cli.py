"""Tests for the scanqa command line entry point."""

import json

import pytest

from scanqa.cli import main
from tests.utils_scan import scan_document, square_room_walls


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.delenv("SCANQA_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


def _write_scan(directory, **sections):
    directory.mkdir()
    path = directory / "rawScan.json"
    path.write_text(json.dumps(scan_document(**sections)), encoding="utf-8")
    return path


def test_prints_metadata_per_scan(tmp_path, capsys):
    scan_dir = tmp_path / "room"
    _write_scan(scan_dir, walls=square_room_walls())
    assert main([str(scan_dir), "--no-cache"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output[str(scan_dir)]["wallCount"] == 4
    assert not (scan_dir / "rawScanMetadata.json").exists()


def test_accepts_scan_file_and_writes_cache(tmp_path, capsys):
    scan_file = _write_scan(tmp_path / "room")
    assert main([str(scan_file)]) == 0
    assert (tmp_path / "room" / "rawScanMetadata.json").exists()
    assert str(tmp_path / "room") in json.loads(capsys.readouterr().out)


def test_output_file(tmp_path):
    scan_dir = tmp_path / "room"
    _write_scan(scan_dir)
    output = tmp_path / "out" / "metadata.json"
    assert main([str(scan_dir), "--no-cache", "--output", str(output)]) == 0
    assert json.loads(output.read_text(encoding="utf-8"))[str(scan_dir)]["schemaVersion"] == 2


def test_bad_scan_sets_exit_code(tmp_path, capsys):
    good = tmp_path / "good"
    _write_scan(good)
    bad = tmp_path / "bad"
    bad.mkdir()
    (bad / "rawScan.json").write_text(json.dumps({"version": 2, "bogus": 1}), encoding="utf-8")
    assert main([str(good), str(bad), "--no-cache"]) == 1
    output = json.loads(capsys.readouterr().out)
    assert list(output) == [str(good)]


def test_invalid_config_exit_code(tmp_path, capsys):
    _write_scan(tmp_path / "room")
    assert main([str(tmp_path / "room"), "--config", str(tmp_path / "missing.yaml")]) == 2
    assert "not found" in capsys.readouterr().err


def test_missing_path_is_not_replaced_by_its_parent(tmp_path, capsys):
    _write_scan(tmp_path / "scans")
    typo = tmp_path / "scans" / "typo"
    assert main([str(typo), "--no-cache"]) == 1
    assert json.loads(capsys.readouterr().out) == {}
