"""Parser for audio effects configuration files.

``parse()`` reads the libraries, effects and processing chains declared in an
``audio_effects.xml`` (or YAML) document and returns a :class:`ParseReport`
holding an immutable :class:`Config`.
"""

from .audio_types import DeviceType, SourceType, StreamType
from .document import DocumentError
from .loader import build_config, parse
from .models import (
    Config,
    DeviceStream,
    Effect,
    EffectImpl,
    InputStream,
    Library,
    OutputStream,
    ParseReport,
    Processings,
    ProxyImpl,
    StreamKind,
)
from .paths import DEFAULT_LOCATIONS, DEFAULT_NAME, LD_EFFECT_LIBRARY_PATH

__all__ = [
    "Config",
    "DEFAULT_LOCATIONS",
    "DEFAULT_NAME",
    "DeviceStream",
    "DeviceType",
    "DocumentError",
    "Effect",
    "EffectImpl",
    "InputStream",
    "LD_EFFECT_LIBRARY_PATH",
    "Library",
    "OutputStream",
    "ParseReport",
    "Processings",
    "ProxyImpl",
    "SourceType",
    "StreamKind",
    "StreamType",
    "build_config",
    "parse",
]
