"""Assemble an effects :class:`~audio_effects_config.models.Config` from a document."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .document import ROOT_TAG, DocumentError, Node, load_document
from .effects import PROXY_TAG, SIMPLE_TAG, parse_effects
from .libraries import parse_libraries
from .models import Config, ParseReport, Processings
from .paths import DEFAULT_NAME, find_default_config
from .processing import SECTION_TAGS, parse_streams
from .validation import SUPPORTED_VERSIONS, parse_version, required_attribute

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _section_children(root: Node, section: str, tags: Tuple[str, ...]) -> List[Node]:
    """Return every *tags* child of every *section* element, in document order."""

    return [node for block in root.children_named(section) for node in block.children_named(*tags)]


def build_config(root: Node) -> Tuple[Config, int]:
    """Return ``(config, skipped)`` for an already loaded document tree.

    Raises :class:`DocumentError` when the root element or its version is
    unusable.
    """

    if root.tag != ROOT_TAG:
        raise DocumentError(f"root element is <{root.tag}>, expected <{ROOT_TAG}>")
    raw_version = root.get("version")
    version = parse_version(raw_version)
    if version is None:
        supported = ", ".join(str(v) for v in SUPPORTED_VERSIONS)
        raise DocumentError(f"unsupported version {raw_version!r} (supported: {supported})")

    libraries, library_index, skipped = parse_libraries(
        _section_children(root, "libraries", ("library",))
    )
    effect_nodes = _section_children(root, "effects", (SIMPLE_TAG, PROXY_TAG))
    effects, effect_index, effect_skips = parse_effects(effect_nodes, library_index)
    skipped += effect_skips
    declared = {required_attribute(node, "name") for node in effect_nodes}
    rejected = frozenset(name for name in declared if name and name not in effect_index)

    chains = {}
    for kind, (section, tag) in SECTION_TAGS.items():
        streams, stream_skips = parse_streams(
            _section_children(root, section, (tag,)), effect_index, kind, rejected
        )
        chains[kind.value] = streams
        skipped += stream_skips

    config = Config(
        version=version,
        libraries=libraries,
        effects=effects,
        processings=Processings(**chains),
    )
    return config, skipped


def parse(path: Optional[PathLike] = None) -> ParseReport:
    """Parse the effects configuration at *path*.

    When *path* is ``None`` the first ``DEFAULT_NAME`` found in the search
    directories is used. Invalid libraries, effects, streams and effect
    applications are skipped and counted; parsing continues with the next
    element. If the document itself is unusable the report carries no config
    and a skip count of 0. This function does not raise for bad input.
    """

    if path is None:
        resolved = find_default_config()
        if resolved is None:
            logger.error("No %s found in the default locations", DEFAULT_NAME)
            return ParseReport(config=None, skipped_element_count=0, source_path=DEFAULT_NAME)
    else:
        resolved = Path(os.path.expanduser(os.fspath(path)))

    source_path = str(resolved)
    try:
        config, skipped = build_config(load_document(resolved))
    except DocumentError as exc:
        logger.error("Cannot load effects configuration %s: %s", source_path, exc)
        return ParseReport(config=None, skipped_element_count=0, source_path=source_path)

    if skipped:
        logger.warning("%d invalid element(s) skipped while parsing %s", skipped, source_path)
    logger.debug(
        "Loaded %d libraries and %d effects from %s",
        len(config.libraries),
        len(config.effects),
        source_path,
    )
    return ParseReport(config=config, skipped_element_count=skipped, source_path=source_path)
