"""
Generated project model — IntelliSense metadata and build targets of
one generated IDE project, plus the manifest that lists them.

The manifest (cmakegen.yml) is the canonical input of a run.  If a
project isn't declared here, nothing is aggregated from it.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from cmakegen.core.models.context import HostPlatform, TargetConfiguration


class ProjectTarget(BaseModel):
    """A build target of a generated project.

    ``target_file`` is the ``*.Target.cs`` rules file.  Targets without
    one are skipped during target enumeration.
    """

    target_file: Path | None = None

    @property
    def bare_name(self) -> str | None:
        """Target file name with every extension removed."""
        if self.target_file is None:
            return None
        return self.target_file.name.split(".", 1)[0]


class GeneratedProject(BaseModel):
    """One generated project and the metadata it reports.

    Attributes:
        path:           Project file path; its directory anchors relative
                        include search paths.
        include_paths:  IntelliSense include search paths.
        definitions:    IntelliSense preprocessor definitions.
        targets:        Build targets, in listed order.
    """

    path: Path
    include_paths: list[str] = Field(default_factory=list)
    definitions: list[str] = Field(default_factory=list)
    targets: list[ProjectTarget] = Field(default_factory=list)

    @field_validator("targets", mode="before")
    @classmethod
    def _coerce_targets(cls, value: object) -> object:
        # Accept bare paths (or null) as shorthand for {target_file: ...}
        if isinstance(value, list):
            return [
                item if isinstance(item, (dict, ProjectTarget)) else {"target_file": item}
                for item in value
            ]
        return value

    @property
    def directory(self) -> Path:
        return self.path.parent


class Manifest(BaseModel):
    """Root input of a generation run — loaded from cmakegen.yml.

    Paths may be relative; the loader resolves them against the
    manifest's directory.
    """

    version: int = 1

    engine_root: Path
    game_project: Path | None = None
    master_project_dir: Path | None = None
    platform: HostPlatform | None = None
    architecture: str | None = None
    valid_configurations: list[TargetConfiguration] = Field(
        default_factory=lambda: ["Debug", "DebugGame", "Development", "Shipping", "Test"],
    )
    modules: list[Path] = Field(default_factory=list)
    projects: list[GeneratedProject] = Field(default_factory=list)
