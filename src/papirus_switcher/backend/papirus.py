"""Query and change the Papirus folder color through papirus-folders."""

from __future__ import annotations

import logging
import subprocess
from typing import Iterable, Optional, Protocol

from papirus_switcher.config import Settings
from papirus_switcher.errors import ApplyError, CommandNotFoundError

logger = logging.getLogger(__name__)


class FolderColorBackend(Protocol):
    """What the picker needs from the system that owns the real setting."""

    def query_active(self) -> Optional[str]:
        """Active color from `papirus-folders -l`; None if it can't be determined."""
        """Name of the color currently in effect, or None if unknown."""
        ...

    def apply(self, name: str) -> None:
        """Make name the active color. Raises ApplyError on failure."""
        ...


def parse_active_name(lines: Iterable[str]) -> Optional[str]:
    """
    Find the active color in `papirus-folders -l` output.
    
    The active color is listed as ``> name``; the first such line wins.
    """
    for line in lines:
        stripped = line.strip()
        if stripped.startswith(">"):
            name = stripped[1:].strip()
            if name:
                return name
    return None


class PapirusFolders:
    """papirus-folders command-line tool."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()

    def query_command(self) -> list[str]:
        return [self.settings.command, "-l", "--theme", self.settings.theme]

    def apply_command(self, name: str) -> list[str]:
        return [self.settings.command, "-C", name, "--theme", self.settings.theme]

    def query_active(self) -> Optional[str]:
        cmd = self.query_command()
        logger.debug("Querying active folder color: %s", cmd)
        try:
            result = subprocess.run(cmd, capture_output=True, encoding="utf-8", errors="replace")
        except OSError as e:
            logger.info("Could not run %s: %s", cmd[0], e)
            return None

        if result.returncode != 0:
            logger.info("%s exited with status %d", cmd[0], result.returncode)

        name = parse_active_name(result.stdout.splitlines())
        logger.debug("Active folder color: %s", name)
        return name

    def apply(self, name: str) -> None:
        """
        Run papirus-folders to switch the folder color.
        
        stdin is inherited so a sudo password prompt can be answered on
        the terminal; stdout and stderr are captured for error reporting.
        Undecodable bytes in the output are replaced, never raised.
        """
        cmd = self.apply_command(name)
        logger.info("Applying folder color: %s", cmd)
        try:
            result = subprocess.run(cmd, capture_output=True, encoding="utf-8", errors="replace")
        except (FileNotFoundError, PermissionError) as e:
            logger.warning("Could not launch %s: %s", cmd[0], e)
            raise CommandNotFoundError(cmd[0]) from e

        if result.returncode != 0:
            output = [text.strip() for text in (result.stderr, result.stdout) if text and text.strip()]
            message = "\n".join(output) or f"{cmd[0]} exited with status {result.returncode}"
            logger.warning("Apply failed (status %d): %s", result.returncode, message)
            raise ApplyError(message)

        logger.info("Folder color set to %s", name)
