"""Read configuration documents into a format-neutral node tree.

XML files are read with ``xml.etree.ElementTree``; ``.yaml``/``.yml`` files
with PyYAML. Both produce the same :class:`Node` tree, so the registries never
see which syntax the document used.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

ROOT_TAG = "audio_effects_conf"
YAML_SUFFIXES = {".yaml", ".yml"}


class DocumentError(ValueError):
    """The document as a whole cannot be used."""


@dataclass(frozen=True)
class Node:
    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: Tuple["Node", ...] = ()

    def get(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def children_named(self, *tags: str) -> List["Node"]:
        return [child for child in self.children if child.tag in tags]


def _local_name(name: str) -> str:
    if name.startswith("{"):
        return name.split("}", 1)[1]
    return name


def _from_element(root: ET.Element) -> Node:
    # Post-order walk with an explicit stack: children are built before
    # their parent, whatever the nesting depth.
    built: Dict[int, Node] = {}
    stack = [(root, False)]
    while stack:
        element, expanded = stack.pop()
        if not expanded:
            stack.append((element, True))
            stack.extend((child, False) for child in element)
            continue
        built[id(element)] = Node(
            tag=_local_name(element.tag),
            attributes={_local_name(key): value for key, value in element.attrib.items()},
            children=tuple(built.pop(id(child)) for child in element),
        )
    return built[id(root)]


def read_xml(path: Path) -> Node:
    try:
        tree = ET.parse(str(path))
    except ET.ParseError as exc:
        raise DocumentError(f"{path}: malformed XML ({exc})") from exc
    except OSError as exc:
        raise DocumentError(f"{path}: cannot read file ({exc})") from exc
    return _from_element(tree.getroot())


def _scalar_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _scalar_attributes(entry: Any) -> Dict[str, str]:
    # Entries that are not mappings become attribute-less nodes, which the
    # registries then reject one by one.
    if not isinstance(entry, Mapping):
        return {}
    attributes = {}
    for key, value in entry.items():
        text = _scalar_text(value)
        if text is not None:
            attributes[str(key)] = text
    return attributes


def _yaml_entries(section: str, value: Any) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise DocumentError(f"{section} must be a list, got {type(value).__name__}")
    return value


def _yaml_apply(entry: Any) -> Node:
    if isinstance(entry, str):
        return Node("apply", {"effect": entry})
    return Node("apply", _scalar_attributes(entry))


def _yaml_stream(tag: str, entry: Any) -> Node:
    applies = entry.get("apply") if isinstance(entry, Mapping) else None
    if applies is None:
        applies = []
    elif not isinstance(applies, list):
        applies = [applies]
    attributes = _scalar_attributes(entry)
    attributes.pop("apply", None)
    return Node(tag, attributes, tuple(_yaml_apply(item) for item in applies))


def _yaml_effect(entry: Any) -> Node:
    attributes = _scalar_attributes(entry)
    if attributes.pop("proxy", "false").lower() != "true":
        return Node("effect", attributes)
    children = []
    for key, tag in (("software", "libsw"), ("hardware", "libhw")):
        arm = entry.get(key)
        if arm is not None:
            children.append(Node(tag, _scalar_attributes(arm)))
    return Node("effectProxy", attributes, tuple(children))


def tree_from_mapping(data: Any, *, name: str = "document") -> Node:
    """Convert a YAML/JSON-style mapping into the XML-shaped node tree."""

    if not isinstance(data, Mapping):
        raise DocumentError(f"{name} must contain a mapping at top level")

    sections = [
        Node(
            "libraries",
            children=tuple(
                Node("library", _scalar_attributes(entry))
                for entry in _yaml_entries("libraries", data.get("libraries"))
            ),
        ),
        Node(
            "effects",
            children=tuple(
                _yaml_effect(entry) for entry in _yaml_entries("effects", data.get("effects"))
            ),
        ),
    ]
    for section, tag in (
        ("preprocess", "stream"),
        ("postprocess", "stream"),
        ("deviceEffects", "devicePort"),
    ):
        sections.append(
            Node(
                section,
                children=tuple(
                    _yaml_stream(tag, entry)
                    for entry in _yaml_entries(section, data.get(section))
                ),
            )
        )

    attributes = {}
    version = _scalar_text(data.get("version"))
    if version is not None:
        attributes["version"] = version
    return Node(ROOT_TAG, attributes, tuple(sections))


def read_yaml(path: Path) -> Node:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"{path}: cannot read file ({exc})") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentError(f"{path}: malformed YAML ({exc})") from exc
    except RecursionError as exc:
        raise DocumentError(f"{path}: document nested too deeply") from exc
    return tree_from_mapping(data, name=str(path))


def load_document(path: Path) -> Node:
    """Return the root node of the document at *path*.

    Raises :class:`DocumentError` when the file is missing or unparseable.
    """

    if not path.is_file():
        raise DocumentError(f"{path}: no such file")
    logger.debug("Reading effects configuration from %s", path)
    if path.suffix.lower() in YAML_SUFFIXES:
        return read_yaml(path)
    return read_xml(path)
