"""External collaborators that own the real folder color setting."""

from papirus_switcher.backend.papirus import FolderColorBackend, PapirusFolders, parse_active_name

__all__ = ["FolderColorBackend", "PapirusFolders", "parse_active_name"]
