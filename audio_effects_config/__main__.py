"""Module entry to expose `python -m audio_effects_config` CLI.

Delegates to `audio_effects_config.cli.main`.
"""

import sys

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
