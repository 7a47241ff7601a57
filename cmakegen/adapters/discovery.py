"""
Discovery adapter — locate module rules files and enumerate their sources.

Default filesystem implementation of the two discovery collaborators.
Both walk in sorted order so that repeated runs see files in the same
sequence.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from cmakegen.core.models.context import GenerationContext
from cmakegen.core.models.module import MODULE_RULES_SUFFIX, ModuleFile

logger = logging.getLogger(__name__)

# Directories never searched for modules or sources
_SKIP_DIRS = frozenset({"Intermediate", "Binaries", "Saved", "DerivedDataCache"})

# Search roots relative to the engine root and the game root
_ENGINE_MODULE_DIRS = ("Engine/Source", "Engine/Plugins")
_GAME_MODULE_DIRS = ("Source", "Plugins")


def _skip_dir(name: str) -> bool:
    return name in _SKIP_DIRS or name.startswith(".")


def _walk_sorted(root: Path) -> Iterable[Path]:
    """Yield every file under *root*, directories and files sorted by name."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not _skip_dir(d))
        for filename in sorted(filenames):
            yield Path(dirpath) / filename


def module_search_dirs(context: GenerationContext) -> list[Path]:
    """Directories that may contain module rules files, engine first."""
    dirs = [context.roots.engine_root / d for d in _ENGINE_MODULE_DIRS]
    if context.roots.game_root is not None:
        dirs.extend(context.roots.game_root / d for d in _GAME_MODULE_DIRS)
    return dirs


def discover_modules(context: GenerationContext) -> list[ModuleFile]:
    """Find every ``*.Build.cs`` under the engine and game source trees.

    Returns:
        Modules ordered by search root, then by path.
    """
    modules: list[ModuleFile] = []
    seen: set[Path] = set()

    for search_dir in module_search_dirs(context):
        if not search_dir.is_dir():
            logger.debug("Module search dir missing: %s", search_dir)
            continue
        for path in _walk_sorted(search_dir):
            if path.name.endswith(MODULE_RULES_SUFFIX) and path not in seen:
                seen.add(path)
                modules.append(ModuleFile(path=path))

    logger.info("Discovered %d module(s)", len(modules))
    return modules


def modules_from_paths(paths: Iterable[Path]) -> list[ModuleFile]:
    """Wrap explicitly listed rules files, keeping their order."""
    return [ModuleFile(path=p) for p in paths]


def find_module_source_files(module: ModuleFile) -> list[Path]:
    """Every file under the module's directory, in sorted walk order."""
    if not module.directory.is_dir():
        logger.warning("Module directory missing: %s", module.directory)
        return []
    return list(_walk_sorted(module.directory))
