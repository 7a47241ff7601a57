"""
Config check use case — validate cmakegen.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from cmakegen.core.config.loader import (
    ConfigError,
    build_context,
    find_manifest_file,
    load_manifest,
)
from cmakegen.core.models.project import Manifest
from cmakegen.core.services.generators.cmakelists import supported_platforms


@dataclass
class ConfigCheckResult:
    """Result of manifest validation."""

    valid: bool = False
    manifest: Manifest | None = None
    config_path: Path | None = None
    platform: str | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "platform": self.platform,
            "project_count": len(self.manifest.projects) if self.manifest else 0,
            "module_count": len(self.manifest.modules) if self.manifest else 0,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate the manifest and report issues.

    Args:
        config_path: Optional explicit path to cmakegen.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_manifest_file()
    if config_path is None:
        result.errors.append("No cmakegen.yml found.")
        return result
    result.config_path = config_path

    # Load and validate
    try:
        manifest = load_manifest(config_path)
        result.manifest = manifest
        context = build_context(manifest)
        result.platform = context.platform
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    # Semantic checks
    if context.platform not in supported_platforms():
        result.errors.append(
            f"Platform '{context.platform}' is not supported. "
            f"Supported: {', '.join(supported_platforms())}"
        )

    if not (manifest.engine_root / "Engine").is_dir():
        result.warnings.append(f"Engine directory not found under {manifest.engine_root}")

    if manifest.game_project is not None and not manifest.game_project.is_file():
        result.warnings.append(f"Game project file does not exist: {manifest.game_project}")

    if not manifest.projects:
        result.warnings.append("No projects defined. The descriptor will have no build targets.")

    # Check for duplicate project paths
    paths = [str(p.path) for p in manifest.projects]
    dupes = {p for p in paths if paths.count(p) > 1}
    if dupes:
        result.errors.append(f"Duplicate project paths: {', '.join(sorted(dupes))}")

    for project in manifest.projects:
        skipped = sum(1 for t in project.targets if t.target_file is None)
        if skipped:
            result.warnings.append(
                f"Project '{project.path.name}' has {skipped} target(s) without a target file"
            )

    for module in manifest.modules:
        if not module.is_file():
            result.warnings.append(f"Module rules file does not exist: {module}")

    # Result
    result.valid = len(result.errors) == 0
    return result
