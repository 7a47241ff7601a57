"""
Module model — a located build module and the files found under it.

Modules come from the discovery collaborator; files come from the
source enumeration collaborator.  Both are produced once per run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

FileCategory = Literal["source", "header", "config"]

MODULE_RULES_SUFFIX = ".Build.cs"


class ModuleFile(BaseModel):
    """A located module definition (``<Name>.Build.cs``)."""

    model_config = ConfigDict(frozen=True)

    path: Path

    @property
    def name(self) -> str:
        """Module name — the rules file name without ``.Build.cs``."""
        file_name = self.path.name
        if file_name.endswith(MODULE_RULES_SUFFIX):
            return file_name[: -len(MODULE_RULES_SUFFIX)]
        return self.path.stem

    @property
    def directory(self) -> Path:
        return self.path.parent


class DiscoveredFile(BaseModel):
    """A file found under a module's source tree."""

    path: Path
    category: FileCategory | None = None
