from __future__ import annotations

from audio_effects_config.document import Node
from audio_effects_config.libraries import parse_libraries


def _library(**attributes: str) -> Node:
    return Node("library", attributes)


def test_accepts_named_libraries_in_document_order() -> None:
    libraries, index, skipped = parse_libraries(
        [
            _library(name="bundle", path="libbundlewrapper.so"),
            _library(name="reverb", path="libreverbwrapper.so"),
        ]
    )

    assert skipped == 0
    assert [lib.name for lib in libraries] == ["bundle", "reverb"]
    assert index["reverb"] is libraries[1]


def test_missing_name_or_path_is_skipped() -> None:
    libraries, index, skipped = parse_libraries(
        [
            _library(path="libnoname.so"),
            _library(name="nopath"),
            _library(name="  ", path="libblank.so"),
            _library(name="ok", path="libok.so"),
        ]
    )

    assert skipped == 3
    assert [lib.name for lib in libraries] == ["ok"]
    assert set(index) == {"ok"}


def test_duplicate_name_keeps_first_occurrence() -> None:
    libraries, index, skipped = parse_libraries(
        [
            _library(name="bundle", path="/vendor/lib/soundfx/first.so"),
            _library(name="bundle", path="/vendor/lib/soundfx/second.so"),
        ]
    )

    assert skipped == 1
    assert len(libraries) == 1
    assert index["bundle"].path == "/vendor/lib/soundfx/first.so"
    assert index["bundle"] is libraries[0]


def test_empty_input() -> None:
    assert parse_libraries([]) == ((), {}, 0)


def test_unnamed_library_is_logged_without_quotes(caplog) -> None:
    parse_libraries([_library(path="libnoname.so"), _library(name="nopath")])

    assert "Skipping library <unnamed>:" in caplog.text
    assert "'<unnamed>'" not in caplog.text
    assert "Skipping library 'nopath':" in caplog.text
