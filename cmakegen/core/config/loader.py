"""
Configuration loader — reads cmakegen.yml into domain models.

This is the primary entry point for loading generation input.
It reads YAML, validates against Pydantic schemas, resolves relative
paths against the manifest's directory, and builds the immutable
GenerationContext the pipeline runs on.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import yaml

from cmakegen.core.models.context import GenerationContext, RootContext
from cmakegen.core.models.project import Manifest

logger = logging.getLogger(__name__)

# Default config filename
MANIFEST_FILE = "cmakegen.yml"

# platform.system() → host platform name
_HOST_PLATFORMS = {
    "Windows": "Win64",
    "Darwin": "Mac",
    "Linux": "Linux",
}


class ConfigError(Exception):
    """Raised when the generation manifest is invalid or missing."""


def find_manifest_file(start_dir: Path | None = None) -> Path | None:
    """Search for cmakegen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to cmakegen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / MANIFEST_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_manifest(path: Path | None = None) -> Manifest:
    """Load and validate the generation manifest.

    Relative paths inside the manifest are resolved against the
    manifest's own directory.

    Args:
        path: Explicit path to cmakegen.yml. If None, searches upward.

    Returns:
        Validated Manifest model with absolute paths.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_manifest_file()

    if path is None:
        raise ConfigError(
            f"No {MANIFEST_FILE} found. "
            "Create one next to your engine checkout, or specify --config."
        )

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading manifest from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        manifest = Manifest.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid manifest: {e}") from e

    manifest = _resolve_paths(manifest, path.parent.resolve())
    logger.info(
        "Loaded manifest with %d project(s), %d explicit module(s)",
        len(manifest.projects),
        len(manifest.modules),
    )
    return manifest


def _resolve_paths(manifest: Manifest, base_dir: Path) -> Manifest:
    """Return a copy of *manifest* with every path made absolute."""

    def _abs(p: Path) -> Path:
        return p if p.is_absolute() else (base_dir / p).resolve()

    projects = [
        project.model_copy(
            update={
                "path": _abs(project.path),
                "targets": [
                    t.model_copy(update={"target_file": _abs(t.target_file)})
                    if t.target_file is not None else t
                    for t in project.targets
                ],
            }
        )
        for project in manifest.projects
    ]

    return manifest.model_copy(
        update={
            "engine_root": _abs(manifest.engine_root),
            "game_project": _abs(manifest.game_project) if manifest.game_project else None,
            "master_project_dir": (
                _abs(manifest.master_project_dir) if manifest.master_project_dir else None
            ),
            "modules": [_abs(m) for m in manifest.modules],
            "projects": projects,
        }
    )


def detect_host_platform() -> str | None:
    """Map the running OS onto a host platform name, or None if unknown."""
    return _HOST_PLATFORMS.get(platform.system())


def build_context(manifest: Manifest) -> GenerationContext:
    """Build the immutable generation context from a loaded manifest.

    Raises:
        ConfigError: If no platform is given and the host OS is unknown.
    """
    host_platform = manifest.platform or detect_host_platform()
    if host_platform is None:
        raise ConfigError(
            f"Cannot determine host platform from OS '{platform.system()}'. "
            "Set 'platform' in the manifest."
        )

    game_root = manifest.game_project.parent if manifest.game_project else None

    return GenerationContext(
        roots=RootContext(engine_root=manifest.engine_root, game_root=game_root),
        master_project_dir=manifest.master_project_dir or manifest.engine_root,
        game_project_file=manifest.game_project,
        platform=host_platform,
        architecture=manifest.architecture or host_platform,
        valid_configurations=tuple(manifest.valid_configurations),
    )
