from __future__ import annotations

import os
from pathlib import Path

import pytest

from audio_effects_config import paths
from audio_effects_config.models import Library


def test_search_dirs_default_to_system_locations(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(paths.ENV_CONFIG_DIRS, raising=False)
    assert paths.get_search_dirs() == tuple(Path(p) for p in paths.DEFAULT_LOCATIONS)


def test_search_dirs_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(paths.ENV_CONFIG_DIRS, os.pathsep.join([str(tmp_path / "a"), "", str(tmp_path / "b")]))
    assert paths.get_search_dirs() == (tmp_path / "a", tmp_path / "b")


def test_search_dirs_expand_user(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(paths.ENV_CONFIG_DIRS, "~/audio")
    assert paths.get_search_dirs() == (Path("~/audio").expanduser(),)


def test_find_default_config_ignores_directories(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    shadow = tmp_path / "first"
    (shadow / paths.DEFAULT_NAME).mkdir(parents=True)
    real = tmp_path / "second"
    real.mkdir()
    (real / paths.DEFAULT_NAME).write_text("<audio_effects_conf/>", encoding="utf-8")
    monkeypatch.setenv(paths.ENV_CONFIG_DIRS, os.pathsep.join([str(shadow), str(real)]))

    assert paths.find_default_config() == real / paths.DEFAULT_NAME


def test_find_default_config_returns_none(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(paths.ENV_CONFIG_DIRS, str(tmp_path))
    assert paths.find_default_config() is None


def test_library_candidate_paths() -> None:
    relative = Library("bundle", "libbundlewrapper.so")
    assert relative.candidate_paths(("/odm/lib64/soundfx", "/vendor/lib64/soundfx")) == (
        "/odm/lib64/soundfx/libbundlewrapper.so",
        "/vendor/lib64/soundfx/libbundlewrapper.so",
    )
    assert len(relative.candidate_paths()) == len(paths.LD_EFFECT_LIBRARY_PATH)

    absolute = Library("A", "/vendor/lib/soundfx/libA.so")
    assert absolute.candidate_paths() == ("/vendor/lib/soundfx/libA.so",)
