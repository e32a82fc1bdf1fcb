"""Immutable containers for a parsed audio effects configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Optional, Tuple, Union
from uuid import UUID

from .audio_types import DeviceType, SourceType, StreamType
from .paths import LD_EFFECT_LIBRARY_PATH


@dataclass(frozen=True)
class Library:
    """Shared library providing effect implementations."""

    name: str
    path: str

    def candidate_paths(self, search_dirs: Tuple[str, ...] = LD_EFFECT_LIBRARY_PATH) -> Tuple[str, ...]:
        """Return where the library would be looked up, in search order.

        Absolute paths are returned unchanged. Nothing is checked on disk.
        """

        if os.path.isabs(self.path):
            return (self.path,)
        return tuple(os.path.join(directory, self.path) for directory in search_dirs)

    def as_dict(self) -> dict[str, Any]:
        return {"name": self.name, "path": self.path}


@dataclass(frozen=True)
class EffectImpl:
    library: Library
    uuid: UUID

    def as_dict(self) -> dict[str, Any]:
        return {"library": self.library.name, "uuid": str(self.uuid)}


@dataclass(frozen=True)
class ProxyImpl:
    """Effect with a software and a hardware implementation.

    ``proxy`` is the implementation of the proxy itself when the document
    declares one.
    """

    software: EffectImpl
    hardware: EffectImpl
    proxy: Optional[EffectImpl] = None


EffectVariant = Union[EffectImpl, ProxyImpl]


@dataclass(frozen=True)
class Effect:
    name: str
    implementation: EffectVariant

    @property
    def is_proxy(self) -> bool:
        return isinstance(self.implementation, ProxyImpl)

    @property
    def libraries(self) -> Tuple[Library, ...]:
        """Libraries referenced by this effect (shared instances)."""

        impl = self.implementation
        if isinstance(impl, EffectImpl):
            return (impl.library,)
        arms = [impl.software, impl.hardware]
        if impl.proxy is not None:
            arms.insert(0, impl.proxy)
        return tuple(arm.library for arm in arms)

    def as_dict(self) -> dict[str, Any]:
        impl = self.implementation
        if isinstance(impl, EffectImpl):
            return {"name": self.name, **impl.as_dict()}
        payload: dict[str, Any] = {"name": self.name, "proxy": True}
        if impl.proxy is not None:
            payload.update(impl.proxy.as_dict())
        payload["software"] = impl.software.as_dict()
        payload["hardware"] = impl.hardware.as_dict()
        return payload


class StreamKind(Enum):
    """Tag of the three processing chain families."""

    INPUT = "preprocess"
    OUTPUT = "postprocess"
    DEVICE = "deviceprocess"


@dataclass(frozen=True)
class OutputStream:
    kind: ClassVar[StreamKind] = StreamKind.OUTPUT

    type: StreamType
    effects: Tuple[Effect, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "apply": [effect.name for effect in self.effects]}


@dataclass(frozen=True)
class InputStream:
    kind: ClassVar[StreamKind] = StreamKind.INPUT

    type: SourceType
    effects: Tuple[Effect, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "apply": [effect.name for effect in self.effects]}


@dataclass(frozen=True)
class DeviceStream:
    """Chain attached to one device; ``address`` tells instances apart."""

    kind: ClassVar[StreamKind] = StreamKind.DEVICE

    type: DeviceType
    effects: Tuple[Effect, ...] = ()
    address: str = ""

    def as_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "address": self.address,
            "apply": [effect.name for effect in self.effects],
        }


Stream = Union[OutputStream, InputStream, DeviceStream]


@dataclass(frozen=True)
class Processings:
    preprocess: Tuple[InputStream, ...] = ()
    postprocess: Tuple[OutputStream, ...] = ()
    deviceprocess: Tuple[DeviceStream, ...] = ()

    def streams(self, kind: StreamKind) -> Tuple[Stream, ...]:
        return getattr(self, kind.value)


@dataclass(frozen=True)
class Config:
    """Parsed configuration.

    Effects hold the very ``Library`` instances listed in ``libraries`` and
    streams hold the very ``Effect`` instances listed in ``effects``. Nothing
    here is mutated once built, so a single instance can be read from any
    number of threads.
    """

    version: float
    libraries: Tuple[Library, ...] = ()
    effects: Tuple[Effect, ...] = ()
    processings: Processings = Processings()

    @classmethod
    def empty(cls, version: float = 0.0) -> "Config":
        """Configuration without any effect, used when parsing failed."""

        return cls(version=version)

    @property
    def preprocess(self) -> Tuple[InputStream, ...]:
        return self.processings.preprocess

    @property
    def postprocess(self) -> Tuple[OutputStream, ...]:
        return self.processings.postprocess

    @property
    def deviceprocess(self) -> Tuple[DeviceStream, ...]:
        return self.processings.deviceprocess

    def library(self, name: str) -> Optional[Library]:
        return next((lib for lib in self.libraries if lib.name == name), None)

    def effect(self, name: str) -> Optional[Effect]:
        return next((effect for effect in self.effects if effect.name == name), None)

    def as_dict(self) -> dict[str, Any]:
        """Plain mapping in the same shape as a YAML configuration document."""

        return {
            "version": self.version,
            "libraries": [lib.as_dict() for lib in self.libraries],
            "effects": [effect.as_dict() for effect in self.effects],
            "preprocess": [stream.as_dict() for stream in self.preprocess],
            "postprocess": [stream.as_dict() for stream in self.postprocess],
            "deviceEffects": [stream.as_dict() for stream in self.deviceprocess],
        }


@dataclass(frozen=True)
class ParseReport:
    """Outcome of :func:`audio_effects_config.parse`.

    ``config`` is ``None`` when the document itself could not be used; in
    that case ``skipped_element_count`` is always 0.
    """

    config: Optional[Config]
    skipped_element_count: int
    source_path: str

    @property
    def succeeded(self) -> bool:
        return self.config is not None

    def config_or_empty(self) -> Config:
        return self.config if self.config is not None else Config.empty()
