"""Logging helpers for audio_effects_config."""

import logging
import os

ENV_DEBUG = "AUDIO_EFFECTS_CONFIG_DEBUG"
PACKAGE_LOGGER = "audio_effects_config"


def is_debug_enabled() -> bool:
    """Return ``True`` if ``AUDIO_EFFECTS_CONFIG_DEBUG`` is set to a truthy value."""
    val = os.environ.get(ENV_DEBUG, "")
    return bool(val) and val.lower() not in {"0", "false", "no"}


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    The level is ``DEBUG`` when *verbose* is set or debug mode is enabled
    through the environment, ``WARNING`` otherwise. Calling this more than
    once only adjusts the level.
    """
    level = logging.DEBUG if verbose or is_debug_enabled() else logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
