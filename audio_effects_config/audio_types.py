"""Key vocabularies used to identify the streams an effect chain attaches to."""

from __future__ import annotations

from enum import Enum


class ConfigKey(Enum):
    """Base for enums spelled in the configuration document.

    A key may be written either as its document value (``music``) or as the
    member name (``MUSIC``); matching is case-insensitive.
    """

    @classmethod
    def from_name(cls, text: str | None):
        """Return the member spelled by *text* or ``None`` if there is none."""

        if text is None:
            return None
        token = text.strip()
        if not token:
            return None
        for member in cls:
            if token.lower() == member.value.lower() or token.upper() == member.name:
                return member
        return None

    def __str__(self) -> str:
        return self.value


class StreamType(ConfigKey):
    """Output stream types (postprocess chains)."""

    VOICE_CALL = "voice_call"
    SYSTEM = "system"
    RING = "ring"
    MUSIC = "music"
    ALARM = "alarm"
    NOTIFICATION = "notification"
    BLUETOOTH_SCO = "bluetooth_sco"
    ENFORCED_AUDIBLE = "enforced_audible"
    DTMF = "dtmf"
    TTS = "tts"
    ACCESSIBILITY = "accessibility"
    ASSISTANT = "assistant"


class SourceType(ConfigKey):
    """Capture sources (preprocess chains)."""

    MIC = "mic"
    VOICE_UPLINK = "voice_uplink"
    VOICE_DOWNLINK = "voice_downlink"
    VOICE_CALL = "voice_call"
    CAMCORDER = "camcorder"
    VOICE_RECOGNITION = "voice_recognition"
    VOICE_COMMUNICATION = "voice_communication"
    REMOTE_SUBMIX = "remote_submix"
    UNPROCESSED = "unprocessed"
    VOICE_PERFORMANCE = "voice_performance"
    ECHO_REFERENCE = "echo_reference"
    FM_TUNER = "fm_tuner"
    HOTWORD = "hotword"


class DeviceType(ConfigKey):
    """Audio device types (device effect chains)."""

    OUT_EARPIECE = "AUDIO_DEVICE_OUT_EARPIECE"
    OUT_SPEAKER = "AUDIO_DEVICE_OUT_SPEAKER"
    OUT_WIRED_HEADSET = "AUDIO_DEVICE_OUT_WIRED_HEADSET"
    OUT_WIRED_HEADPHONE = "AUDIO_DEVICE_OUT_WIRED_HEADPHONE"
    OUT_BLUETOOTH_SCO = "AUDIO_DEVICE_OUT_BLUETOOTH_SCO"
    OUT_BLUETOOTH_SCO_HEADSET = "AUDIO_DEVICE_OUT_BLUETOOTH_SCO_HEADSET"
    OUT_BLUETOOTH_SCO_CARKIT = "AUDIO_DEVICE_OUT_BLUETOOTH_SCO_CARKIT"
    OUT_BLUETOOTH_A2DP = "AUDIO_DEVICE_OUT_BLUETOOTH_A2DP"
    OUT_BLUETOOTH_A2DP_HEADPHONES = "AUDIO_DEVICE_OUT_BLUETOOTH_A2DP_HEADPHONES"
    OUT_BLUETOOTH_A2DP_SPEAKER = "AUDIO_DEVICE_OUT_BLUETOOTH_A2DP_SPEAKER"
    OUT_AUX_DIGITAL = "AUDIO_DEVICE_OUT_AUX_DIGITAL"
    OUT_HDMI = "AUDIO_DEVICE_OUT_HDMI"
    OUT_ANLG_DOCK_HEADSET = "AUDIO_DEVICE_OUT_ANLG_DOCK_HEADSET"
    OUT_DGTL_DOCK_HEADSET = "AUDIO_DEVICE_OUT_DGTL_DOCK_HEADSET"
    OUT_USB_ACCESSORY = "AUDIO_DEVICE_OUT_USB_ACCESSORY"
    OUT_USB_DEVICE = "AUDIO_DEVICE_OUT_USB_DEVICE"
    OUT_REMOTE_SUBMIX = "AUDIO_DEVICE_OUT_REMOTE_SUBMIX"
    OUT_TELEPHONY_TX = "AUDIO_DEVICE_OUT_TELEPHONY_TX"
    OUT_LINE = "AUDIO_DEVICE_OUT_LINE"
    OUT_HDMI_ARC = "AUDIO_DEVICE_OUT_HDMI_ARC"
    OUT_SPDIF = "AUDIO_DEVICE_OUT_SPDIF"
    OUT_FM = "AUDIO_DEVICE_OUT_FM"
    OUT_AUX_LINE = "AUDIO_DEVICE_OUT_AUX_LINE"
    OUT_SPEAKER_SAFE = "AUDIO_DEVICE_OUT_SPEAKER_SAFE"
    OUT_IP = "AUDIO_DEVICE_OUT_IP"
    OUT_BUS = "AUDIO_DEVICE_OUT_BUS"
    OUT_PROXY = "AUDIO_DEVICE_OUT_PROXY"
    OUT_USB_HEADSET = "AUDIO_DEVICE_OUT_USB_HEADSET"
    OUT_HEARING_AID = "AUDIO_DEVICE_OUT_HEARING_AID"
    OUT_ECHO_CANCELLER = "AUDIO_DEVICE_OUT_ECHO_CANCELLER"
    OUT_BLE_HEADSET = "AUDIO_DEVICE_OUT_BLE_HEADSET"
    OUT_BLE_SPEAKER = "AUDIO_DEVICE_OUT_BLE_SPEAKER"
    IN_COMMUNICATION = "AUDIO_DEVICE_IN_COMMUNICATION"
    IN_AMBIENT = "AUDIO_DEVICE_IN_AMBIENT"
    IN_BUILTIN_MIC = "AUDIO_DEVICE_IN_BUILTIN_MIC"
    IN_BLUETOOTH_SCO_HEADSET = "AUDIO_DEVICE_IN_BLUETOOTH_SCO_HEADSET"
    IN_WIRED_HEADSET = "AUDIO_DEVICE_IN_WIRED_HEADSET"
    IN_AUX_DIGITAL = "AUDIO_DEVICE_IN_AUX_DIGITAL"
    IN_HDMI = "AUDIO_DEVICE_IN_HDMI"
    IN_VOICE_CALL = "AUDIO_DEVICE_IN_VOICE_CALL"
    IN_TELEPHONY_RX = "AUDIO_DEVICE_IN_TELEPHONY_RX"
    IN_BACK_MIC = "AUDIO_DEVICE_IN_BACK_MIC"
    IN_REMOTE_SUBMIX = "AUDIO_DEVICE_IN_REMOTE_SUBMIX"
    IN_ANLG_DOCK_HEADSET = "AUDIO_DEVICE_IN_ANLG_DOCK_HEADSET"
    IN_DGTL_DOCK_HEADSET = "AUDIO_DEVICE_IN_DGTL_DOCK_HEADSET"
    IN_USB_ACCESSORY = "AUDIO_DEVICE_IN_USB_ACCESSORY"
    IN_USB_DEVICE = "AUDIO_DEVICE_IN_USB_DEVICE"
    IN_FM_TUNER = "AUDIO_DEVICE_IN_FM_TUNER"
    IN_TV_TUNER = "AUDIO_DEVICE_IN_TV_TUNER"
    IN_LINE = "AUDIO_DEVICE_IN_LINE"
    IN_SPDIF = "AUDIO_DEVICE_IN_SPDIF"
    IN_BLUETOOTH_A2DP = "AUDIO_DEVICE_IN_BLUETOOTH_A2DP"
    IN_LOOPBACK = "AUDIO_DEVICE_IN_LOOPBACK"
    IN_IP = "AUDIO_DEVICE_IN_IP"
    IN_BUS = "AUDIO_DEVICE_IN_BUS"
    IN_PROXY = "AUDIO_DEVICE_IN_PROXY"
    IN_USB_HEADSET = "AUDIO_DEVICE_IN_USB_HEADSET"
    IN_BLUETOOTH_BLE = "AUDIO_DEVICE_IN_BLUETOOTH_BLE"
    IN_HDMI_ARC = "AUDIO_DEVICE_IN_HDMI_ARC"
    IN_ECHO_REFERENCE = "AUDIO_DEVICE_IN_ECHO_REFERENCE"
    IN_BLE_HEADSET = "AUDIO_DEVICE_IN_BLE_HEADSET"
