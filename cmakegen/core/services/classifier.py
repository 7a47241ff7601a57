"""
File classifier — bucket discovered files into source / header / config.

Files are appended in module-discovery order, then file-enumeration
order within each module.  Nothing is sorted here: determinism comes
from the discovery collaborators.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from cmakegen.core.models.context import GenerationContext
from cmakegen.core.models.module import DiscoveredFile, FileCategory, ModuleFile
from cmakegen.core.services.exclusions import is_excluded
from cmakegen.core.services.paths import engine_relative_path, normalize

logger = logging.getLogger(__name__)

# Checked in order; first suffix match wins.
_EXTENSION_CATEGORIES: tuple[tuple[str, FileCategory], ...] = (
    (".cpp", "source"),
    (".h", "header"),
    (".cs", "config"),
)


@dataclass
class ClassifiedFiles:
    """Rewritten file paths, one ordered list per category."""

    sources: list[str] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)
    configs: list[str] = field(default_factory=list)
    excluded: int = 0

    def bucket(self, category: FileCategory) -> list[str]:
        if category == "source":
            return self.sources
        if category == "header":
            return self.headers
        return self.configs

    @property
    def total(self) -> int:
        return len(self.sources) + len(self.headers) + len(self.configs)

    def to_dict(self) -> dict:
        return {
            "sources": self.sources,
            "headers": self.headers,
            "configs": self.configs,
            "excluded": self.excluded,
            "total": self.total,
        }


def categorize(path: str | Path) -> FileCategory | None:
    """Infer a file's category from its extension, or None to ignore it."""
    name = str(path)
    for suffix, category in _EXTENSION_CATEGORIES:
        if name.endswith(suffix):
            return category
    return None


def discover_file(path: Path) -> DiscoveredFile:
    return DiscoveredFile(path=path, category=categorize(path))


def classify(
    modules: Sequence[ModuleFile],
    list_files: Callable[[ModuleFile], Iterable[Path]],
    context: GenerationContext,
) -> ClassifiedFiles:
    """Classify every file of every module.

    Args:
        modules: Modules in discovery order.
        list_files: Source enumeration collaborator.
        context: Generation context (roots + platform).

    Returns:
        ClassifiedFiles with root-token paths.
    """
    result = ClassifiedFiles()
    roots = context.roots

    for module in modules:
        for path in list_files(module):
            rel = engine_relative_path(path, roots)
            if is_excluded(rel, context.platform):
                result.excluded += 1
                continue

            found = discover_file(path)
            if found.category is None:
                continue

            result.bucket(found.category).append(normalize(found.path, roots))

    logger.debug(
        "Classified %d source(s), %d header(s), %d config(s); %d excluded",
        len(result.sources),
        len(result.headers),
        len(result.configs),
        result.excluded,
    )
    return result
