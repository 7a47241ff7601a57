"""
Clean use case — remove the generated descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cmakegen.core.config.loader import ConfigError, find_manifest_file, load_manifest
from cmakegen.core.services.cmake_generate import clean_descriptor, descriptor_path


@dataclass
class CleanResult:
    """Result of the clean use case."""

    path: Path | None = None
    removed: bool = False
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        return {"path": str(self.path), "removed": self.removed}


def run_clean(
    config_path: Path | None = None,
    output_dir: Path | None = None,
) -> CleanResult:
    """Delete the descriptor, if present.

    Args:
        config_path: Optional explicit path to cmakegen.yml.
        output_dir: Directory holding the descriptor.  Defaults to the
            manifest's master-project directory.

    Returns:
        CleanResult.  A missing descriptor is not an error.
    """
    result = CleanResult()

    if output_dir is None:
        try:
            if config_path is None:
                config_path = find_manifest_file()
            if config_path is None:
                result.error = "No cmakegen.yml found. Pass --output-dir."
                return result
            manifest = load_manifest(config_path)
        except ConfigError as e:
            result.error = str(e)
            return result
        output_dir = manifest.master_project_dir or manifest.engine_root

    result.path = descriptor_path(output_dir)
    try:
        result.removed = clean_descriptor(output_dir)
    except OSError as e:
        result.error = f"Failed to delete {result.path}: {e}"
    return result
