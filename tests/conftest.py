import sys
from pathlib import Path

import pytest

# Allow importing audio_effects_config from repository root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

BASSBOOST_UUID = "8631f300-72e2-11df-b57e-0002a5d5c51b"
VIRTUALIZER_UUID = "1d4033c0-8557-11df-9f2d-0002a5d5c51b"
EQUALIZER_UUID = "ce772f20-847d-11df-bb17-0002a5d5c51b"
OFFLOAD_UUID = "509a4498-561a-4bea-b3b1-0002a5d5c51b"
PROXY_UUID = "c8e70ecd-48ca-456e-8a4f-0002a5d5c51b"

SAMPLE_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<audio_effects_conf version="2.0" xmlns="http://schemas.android.com/audio/audio_effects_conf/v2_0">
    <libraries>
        <library name="bundle" path="libbundlewrapper.so"/>
        <library name="offload" path="libqcompostprocbundle.so"/>
        <library name="proxy" path="libeffectproxy.so"/>
    </libraries>
    <effects>
        <effect name="bassboost" library="bundle" uuid="{BASSBOOST_UUID}"/>
        <effect name="equalizer" library="bundle" uuid="{EQUALIZER_UUID}"/>
        <effectProxy name="virtualizer" library="proxy" uuid="{PROXY_UUID}">
            <libsw library="bundle" uuid="{VIRTUALIZER_UUID}"/>
            <libhw library="offload" uuid="{OFFLOAD_UUID}"/>
        </effectProxy>
    </effects>
    <postprocess>
        <stream type="music">
            <apply effect="bassboost"/>
            <apply effect="virtualizer"/>
        </stream>
    </postprocess>
    <preprocess>
        <stream type="voice_communication">
            <apply effect="equalizer"/>
        </stream>
    </preprocess>
    <deviceEffects>
        <devicePort type="AUDIO_DEVICE_IN_BUILTIN_MIC" address="bottom">
            <apply effect="equalizer"/>
        </devicePort>
    </deviceEffects>
</audio_effects_conf>
"""


@pytest.fixture
def write_config(tmp_path: Path):
    """Return a helper writing *text* under ``tmp_path`` and returning its path."""

    def _write(text: str, name: str = "audio_effects.xml") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config(write_config) -> Path:
    """A valid configuration using every section and a proxy effect."""

    return write_config(SAMPLE_XML)
