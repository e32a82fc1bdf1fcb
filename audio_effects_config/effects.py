"""Parse ``<effect>`` and ``<effectProxy>`` declarations.

A proxy effect bundles a software (``libsw``) and a hardware (``libhw``)
implementation. Both arms must be valid; otherwise the proxy is dropped as a
single element.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .document import Node
from .models import Effect, EffectImpl, EffectVariant, Library, ProxyImpl
from .validation import parse_uuid, required_attribute

logger = logging.getLogger(__name__)

SIMPLE_TAG = "effect"
PROXY_TAG = "effectProxy"
SOFTWARE_TAG = "libsw"
HARDWARE_TAG = "libhw"


def _parse_impl(node: Node, libraries: Mapping[str, Library], what: str) -> EffectImpl:
    library_name = required_attribute(node, "library")
    if library_name is None:
        raise ValueError(f"{what} has no library")
    library = libraries.get(library_name)
    if library is None:
        raise ValueError(f"{what} references unknown library {library_name!r}")
    uuid = parse_uuid(node.get("uuid"))
    if uuid is None:
        raise ValueError(f"{what} has malformed uuid {node.get('uuid')!r}")
    return EffectImpl(library=library, uuid=uuid)


def _single_child(node: Node, tag: str) -> Node:
    matches = node.children_named(tag)
    if len(matches) != 1:
        raise ValueError(f"expected exactly one <{tag}>, found {len(matches)}")
    return matches[0]


def _parse_proxy(node: Node, libraries: Mapping[str, Library]) -> ProxyImpl:
    software = _parse_impl(_single_child(node, SOFTWARE_TAG), libraries, SOFTWARE_TAG)
    hardware = _parse_impl(_single_child(node, HARDWARE_TAG), libraries, HARDWARE_TAG)
    proxy: Optional[EffectImpl] = None
    if node.get("library") is not None or node.get("uuid") is not None:
        proxy = _parse_impl(node, libraries, "proxy implementation")
    return ProxyImpl(software=software, hardware=hardware, proxy=proxy)


def parse_effect(node: Node, libraries: Mapping[str, Library]) -> Effect:
    """Build one effect from *node*.

    Raises ``ValueError`` describing the first problem found.
    """

    name = required_attribute(node, "name")
    if name is None:
        raise ValueError("effect has no name")
    try:
        implementation: EffectVariant
        if node.tag == PROXY_TAG:
            implementation = _parse_proxy(node, libraries)
        else:
            implementation = _parse_impl(node, libraries, "effect")
    except ValueError as exc:
        raise ValueError(f"effect {name!r}: {exc}") from None
    return Effect(name=name, implementation=implementation)


def parse_effects(
    nodes: Iterable[Node], libraries: Mapping[str, Library]
) -> Tuple[Tuple[Effect, ...], Dict[str, Effect], int]:
    """Return ``(effects, index_by_name, skipped)`` for the given effect nodes.

    *libraries* is the name index produced by
    :func:`audio_effects_config.libraries.parse_libraries`.
    """

    effects = []
    index: Dict[str, Effect] = {}
    skipped = 0
    for node in nodes:
        try:
            effect = parse_effect(node, libraries)
        except ValueError as exc:
            logger.warning("Skipping %s: %s", node.tag, exc)
            skipped += 1
            continue
        if effect.name in index:
            logger.warning("Skipping duplicate effect %r", effect.name)
            skipped += 1
            continue
        effects.append(effect)
        index[effect.name] = effect
    return tuple(effects), index, skipped
