"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_COMMAND = "papirus-folders"
DEFAULT_THEME = "Papirus-Dark"


@dataclass(frozen=True)
class Settings:
    """
    Picker settings.
    
    Attributes:
        command: papirus-folders executable (name on PATH or full path)
        theme: Icon theme passed as --theme
        truecolor: Render swatches as 24-bit color
        log_file: Debug log destination, if any
    """
    command: str = DEFAULT_COMMAND
    theme: str = DEFAULT_THEME
    truecolor: bool = True
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Build settings from environment variables.
        
        PAPIRUS_SWITCHER_COMMAND, PAPIRUS_SWITCHER_THEME and
        PAPIRUS_SWITCHER_LOG override the defaults; COLORTERM decides
        whether the terminal gets true color swatches.
        """
        env = os.environ if environ is None else environ
        log_file = env.get("PAPIRUS_SWITCHER_LOG")
        return cls(
            command=env.get("PAPIRUS_SWITCHER_COMMAND") or DEFAULT_COMMAND,
            theme=env.get("PAPIRUS_SWITCHER_THEME") or DEFAULT_THEME,
            truecolor=env.get("COLORTERM", "").lower() in ("truecolor", "24bit"),
            log_file=Path(log_file).expanduser() if log_file else None,
        )
