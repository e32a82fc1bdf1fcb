"""Parse ``<library>`` declarations."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Tuple

from .document import Node
from .models import Library
from .validation import required_attribute

logger = logging.getLogger(__name__)


def parse_libraries(nodes: Iterable[Node]) -> Tuple[Tuple[Library, ...], Dict[str, Library], int]:
    """Return ``(libraries, index_by_name, skipped)`` for the given library nodes.

    A node without ``name`` or ``path`` is skipped, as is any node reusing the
    name of an already accepted library.
    """

    libraries = []
    index: Dict[str, Library] = {}
    skipped = 0
    for node in nodes:
        name = required_attribute(node, "name")
        path = required_attribute(node, "path")
        if name is None or path is None:
            logger.warning(
                "Skipping library %s: name and path are both required",
                repr(name) if name else "<unnamed>",
            )
            skipped += 1
            continue
        if name in index:
            logger.warning("Skipping duplicate library %r (path %s)", name, path)
            skipped += 1
            continue
        library = Library(name=name, path=path)
        libraries.append(library)
        index[name] = library
    return tuple(libraries), index, skipped
