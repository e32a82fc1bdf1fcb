from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import yaml

from audio_effects_config import cli
from audio_effects_config.debug_utils import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_check_prints_summary(sample_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["check", str(sample_config)]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "3 libraries" in out
    assert "3 effects" in out
    assert "0 skipped" in out


def test_path_without_subcommand_defaults_to_check(sample_config: Path, capsys) -> None:
    assert cli.main([str(sample_config)]) == cli.EXIT_OK
    assert str(sample_config) in capsys.readouterr().out


def test_check_reports_document_failure(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing.xml"
    assert cli.main(["check", str(missing)]) == cli.EXIT_DOCUMENT_ERROR
    assert "could not be parsed" in capsys.readouterr().out


def test_check_strict_flags_skipped_elements(write_config) -> None:
    path = write_config(
        '<audio_effects_conf version="2.0">'
        '<libraries><library name="a"/></libraries>'
        "</audio_effects_conf>"
    )
    assert cli.main(["check", str(path)]) == cli.EXIT_OK
    assert cli.main(["check", str(path), "--strict"]) == cli.EXIT_SKIPPED_ELEMENTS


def test_dump_yaml(sample_config: Path, capsys) -> None:
    assert cli.main(["dump", str(sample_config)]) == cli.EXIT_OK
    payload = yaml.safe_load(capsys.readouterr().out)
    assert payload["version"] == 2.0
    assert [e["name"] for e in payload["effects"]] == ["bassboost", "equalizer", "virtualizer"]
    assert payload["postprocess"] == [{"type": "music", "apply": ["bassboost", "virtualizer"]}]


def test_dump_json(sample_config: Path, capsys) -> None:
    assert cli.main(["dump", str(sample_config), "--format", "json"]) == cli.EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    virtualizer = payload["effects"][2]
    assert virtualizer["proxy"] is True
    assert virtualizer["software"]["library"] == "bundle"
    assert virtualizer["hardware"]["library"] == "offload"
    assert payload["deviceEffects"][0]["address"] == "bottom"


def test_dump_failure_goes_to_stderr(tmp_path: Path, capsys) -> None:
    assert cli.main(["dump", str(tmp_path / "absent.xml")]) == cli.EXIT_DOCUMENT_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "could not be parsed" in captured.err


def test_no_arguments_prints_help(capsys) -> None:
    assert cli.main([]) == cli.EXIT_OK
    assert "usage" in capsys.readouterr().out.lower()
