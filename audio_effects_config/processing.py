"""Parse the processing chains attached to output, input and device streams."""

from __future__ import annotations

import logging
from typing import AbstractSet, Dict, Iterable, List, Mapping, Tuple, Type

from .audio_types import ConfigKey, DeviceType, SourceType, StreamType
from .document import Node
from .models import DeviceStream, Effect, InputStream, OutputStream, Stream, StreamKind

logger = logging.getLogger(__name__)

APPLY_TAG = "apply"

#: Section tag and stream tag of each kind in the document.
SECTION_TAGS: Dict[StreamKind, Tuple[str, str]] = {
    StreamKind.INPUT: ("preprocess", "stream"),
    StreamKind.OUTPUT: ("postprocess", "stream"),
    StreamKind.DEVICE: ("deviceEffects", "devicePort"),
}

_KEY_TYPES: Dict[StreamKind, Type[ConfigKey]] = {
    StreamKind.INPUT: SourceType,
    StreamKind.OUTPUT: StreamType,
    StreamKind.DEVICE: DeviceType,
}


def _resolve_applications(
    node: Node, effects: Mapping[str, Effect], rejected: AbstractSet[str], label: str
) -> Tuple[Tuple[Effect, ...], int]:
    resolved: List[Effect] = []
    skipped = 0
    for apply in node.children_named(APPLY_TAG):
        name = (apply.get("effect") or "").strip()
        effect = effects.get(name)
        if effect is None and name in rejected:
            # Already counted when the effect itself was skipped.
            logger.debug("Dropping application of skipped effect %r to %s", name, label)
            continue
        if effect is None:
            logger.warning("Skipping application of unknown effect %r to %s", name, label)
            skipped += 1
            continue
        resolved.append(effect)
    return tuple(resolved), skipped


def _build_stream(kind: StreamKind, key: ConfigKey, node: Node, effects: Tuple[Effect, ...]) -> Stream:
    if kind is StreamKind.OUTPUT:
        return OutputStream(type=key, effects=effects)
    if kind is StreamKind.INPUT:
        return InputStream(type=key, effects=effects)
    return DeviceStream(type=key, effects=effects, address=node.get("address") or "")


def parse_streams(
    nodes: Iterable[Node],
    effects: Mapping[str, Effect],
    kind: StreamKind,
    rejected: AbstractSet[str] = frozenset(),
) -> Tuple[Tuple[Stream, ...], int]:
    """Return ``(streams, skipped)`` for stream nodes of the given *kind*.

    A stream whose ``type`` cannot be parsed is dropped whole. Applications
    naming an unknown effect are dropped one by one; the stream is kept even
    if none of its applications resolve. Applications naming one of the
    *rejected* effects (declared, but skipped by the effect registry) are
    dropped without being counted again.
    """

    key_type = _KEY_TYPES[kind]
    streams: List[Stream] = []
    skipped = 0
    for node in nodes:
        raw_key = node.get("type")
        key = key_type.from_name(raw_key)
        if key is None:
            logger.warning("Skipping %s stream with invalid type %r", kind.value, raw_key)
            skipped += 1
            continue
        label = f"{kind.value} stream {key.value}"
        resolved, missed = _resolve_applications(node, effects, rejected, label)
        skipped += missed
        streams.append(_build_stream(kind, key, node, resolved))
    return tuple(streams), skipped
