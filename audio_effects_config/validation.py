"""Validation helpers for configuration attributes.

Element-level helpers return ``None`` for unusable values so the caller can
skip the element; they never raise.
"""

from __future__ import annotations

import re
from typing import Optional
from uuid import UUID

from .document import Node

SUPPORTED_VERSIONS = (2.0,)

_UUID_RE = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def required_attribute(node: Node, name: str) -> Optional[str]:
    """Return the stripped attribute *name* of *node*, or ``None`` if empty."""

    value = node.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_uuid(text: Optional[str]) -> Optional[UUID]:
    """Parse an effect identifier written as ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx``."""

    if text is None:
        return None
    text = text.strip()
    if not _UUID_RE.match(text):
        return None
    return UUID(text)


def parse_version(text: Optional[str]) -> Optional[float]:
    """Return the document version if it is one of ``SUPPORTED_VERSIONS``."""

    if text is None:
        return None
    try:
        version = float(text.strip())
    except ValueError:
        return None
    if version not in SUPPORTED_VERSIONS:
        return None
    return version
