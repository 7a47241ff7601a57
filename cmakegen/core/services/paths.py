"""
Path normalization — rewrite absolute paths into root-token form.

Every emitted path is expressed against ``${UE4_ROOT_PATH}`` or
``${GAME_ROOT_PATH}`` so the descriptor stays valid on machines with a
different install location.  Separators are always ``/``.

Pure functions — no filesystem access.
"""

from __future__ import annotations

import os
from pathlib import Path

from cmakegen.core.models.context import RootContext

# Length of the "../" escape left on a path one level above Engine/
_ESCAPE_PREFIX_LEN = 3


def clean_separators(path: str | Path) -> str:
    """Convert every directory separator to ``/``."""
    return str(path).replace("\\", "/")


def relative_path(path: str | Path, start: str | Path) -> str:
    """Relativize *path* against *start* with ``/`` separators.

    When no relative path exists (different drives), *path* itself is
    returned, still absolute.
    """
    try:
        rel = os.path.relpath(str(path), str(start))
    except ValueError:
        rel = str(path)
    return clean_separators(rel)


def is_under_root(relative: str) -> bool:
    """True if a relativized path stays inside its root."""
    return not relative.startswith("..") and not os.path.isabs(relative)


def engine_relative_path(path: str | Path, roots: RootContext) -> str:
    """Path of *path* relative to the ``Engine`` directory."""
    return relative_path(path, roots.engine_dir)


def normalize(path: str | Path, roots: RootContext) -> str:
    """Rewrite an absolute file path into its root-token form.

    - Under ``<engine root>/Engine`` → ``${UE4_ROOT_PATH}/Engine/<rel>``
    - Elsewhere, with a game project → ``${GAME_ROOT_PATH}/<rel to game root>``
    - Elsewhere, without one → the engine-relative path minus its ``../``
    """
    rel = engine_relative_path(path, roots)
    if is_under_root(rel):
        return f"{roots.engine_token}/Engine/{rel}"

    if roots.has_game:
        game_rel = relative_path(path, roots.game_root)
        return f"{roots.game_token}/{game_rel}"

    return rel[_ESCAPE_PREFIX_LEN:]
