"""
Include / definition aggregation across all generated projects.

Both aggregates are insertion-ordered sets: the first occurrence of an
entry fixes its position, later duplicates are dropped.  Boolean-like
definitions (``X=0`` / ``X=1``) collapse to a single form.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from cmakegen.core.models.context import GenerationContext
from cmakegen.core.models.project import GeneratedProject
from cmakegen.core.services.paths import clean_separators, is_under_root, relative_path

logger = logging.getLogger(__name__)

# IntelliSense reports these unreliably; always use the other form.
PINNED_DEFINITIONS = frozenset({"WITH_EDITORONLY_DATA=0", "WITH_DATABASE_SUPPORT=1"})

# Values that differ per translation unit.
EXCLUDED_DEFINITION_PREFIXES = ("UE_ENGINE_DIRECTORY", "ORIGINAL_FILE_NAME")


class OrderedSet:
    """Insertion-ordered set of strings with O(1) membership checks."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: list[str] = []
        self._index: set[str] = set()
        for item in items:
            self.add(item)

    def add(self, item: str) -> bool:
        """Add *item*; return False if it was already present."""
        if item in self._index:
            return False
        self._index.add(item)
        self._items.append(item)
        return True

    def __contains__(self, item: object) -> bool:
        return item in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedSet({self._items!r})"

    def to_list(self) -> list[str]:
        return list(self._items)


@dataclass
class Aggregate:
    """Result of aggregating IntelliSense metadata."""

    include_directories: OrderedSet = field(default_factory=OrderedSet)
    definitions: OrderedSet = field(default_factory=OrderedSet)

    def to_dict(self) -> dict:
        return {
            "include_directories": self.include_directories.to_list(),
            "definitions": self.definitions.to_list(),
        }


# ── Include directories ─────────────────────────────────────────


def _master_token(context: GenerationContext) -> str | None:
    """Root token naming the master-project directory, if it is a root."""
    roots = context.roots
    master = Path(os.path.abspath(context.master_project_dir))
    if master == Path(os.path.abspath(roots.engine_root)):
        return roots.engine_token
    if roots.game_root is not None and master == Path(os.path.abspath(roots.game_root)):
        return roots.game_token
    return None


def resolve_include_directory(
    include_dir: str,
    project_dir: str | Path,
    context: GenerationContext,
) -> str | None:
    """Resolve one include search path to its emitted form.

    Relative paths are resolved against *project_dir*.  Inside the
    master-project tree the result is root-token relative; outside it
    stays absolute, except that an engine-root prefix is tokenized.

    Returns:
        The directory string, or None if the entry is unusable.
    """
    include_dir = include_dir.strip()
    if not include_dir:
        return None

    master = clean_separators(os.path.abspath(context.master_project_dir))
    cleaned = clean_separators(include_dir)

    inside_master = cleaned == master or cleaned.startswith(master.rstrip("/") + "/")
    if os.path.isabs(include_dir) and not inside_master:
        full = cleaned
    else:
        full = clean_separators(os.path.normpath(os.path.join(clean_separators(project_dir), cleaned)))

    full = full.rstrip("/") or "/"
    token = _master_token(context)
    rel = relative_path(full, master).rstrip("/")

    if token is not None and is_under_root(rel):
        return token if rel == "." else f"{token}/{rel}"

    engine_root = clean_separators(os.path.abspath(context.roots.engine_root)).rstrip("/")
    if full == engine_root or full.startswith(engine_root + "/"):
        return context.roots.engine_token + full[len(engine_root):]
    return full


# ── Preprocessor definitions ────────────────────────────────────


def alternate_definition(definition: str) -> str:
    """Flip a trailing ``=0`` ↔ ``=1``; other definitions map to themselves."""
    if definition.endswith("=0"):
        return definition[:-2] + "=1"
    if definition.endswith("=1"):
        return definition[:-2] + "=0"
    return definition


def add_definition(definitions: OrderedSet, raw: str) -> bool:
    """Add one definition to the aggregate, applying the collapse rules.

    Returns:
        True if the definition (or its pinned form) was added.
    """
    definition = raw.strip()
    if not definition:
        return False

    alternate = alternate_definition(definition)
    if definition in PINNED_DEFINITIONS:
        definition, alternate = alternate, definition

    if definition in definitions or alternate in definitions:
        return False
    if definition.startswith(EXCLUDED_DEFINITION_PREFIXES):
        return False

    return definitions.add(definition)


# ── Public API ──────────────────────────────────────────────────


def aggregate(projects: Sequence[GeneratedProject], context: GenerationContext) -> Aggregate:
    """Collect include directories and definitions across *projects*.

    Projects are visited in generation order; the first occurrence of
    each entry wins.
    """
    result = Aggregate()

    for project in projects:
        for include_path in project.include_paths:
            directory = resolve_include_directory(include_path, project.directory, context)
            if directory is None:
                logger.debug("Dropping unusable include path %r from %s", include_path, project.path)
                continue
            result.include_directories.add(directory)

        for definition in project.definitions:
            add_definition(result.definitions, definition)

    logger.debug(
        "Aggregated %d include dir(s), %d definition(s) from %d project(s)",
        len(result.include_directories),
        len(result.definitions),
        len(projects),
    )
    return result
