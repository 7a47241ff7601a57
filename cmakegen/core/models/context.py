"""
Generation context — the immutable settings threaded through every
pipeline stage.

Platforms and configurations are fixed enumerations.  Declaration
order matters: target rules are emitted in the order configurations
appear in ``CONFIGURATIONS``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


HostPlatform = Literal[
    "Win32", "Win64", "Mac", "Linux", "XboxOne", "PS4", "IOS", "Android", "HTML5",
]

PLATFORMS: tuple[str, ...] = (
    "Win32", "Win64", "Mac", "Linux", "XboxOne", "PS4", "IOS", "Android", "HTML5",
)

TargetConfiguration = Literal[
    "Unknown", "Debug", "DebugGame", "Development", "Shipping", "Test",
]

CONFIGURATIONS: tuple[str, ...] = (
    "Unknown", "Debug", "DebugGame", "Development", "Shipping", "Test",
)

# Never enumerated per-configuration; Development is covered by the
# always-emitted default rule.
UNKNOWN_CONFIGURATION = "Unknown"
DEFAULT_CONFIGURATION = "Development"

ENGINE_ROOT_TOKEN = "${UE4_ROOT_PATH}"
GAME_ROOT_TOKEN = "${GAME_ROOT_PATH}"
GAME_PROJECT_FILE_TOKEN = "${GAME_PROJECT_FILE}"


class RootContext(BaseModel):
    """The two roots a discovered path may live under."""

    model_config = ConfigDict(frozen=True)

    engine_root: Path
    game_root: Path | None = None
    engine_token: str = ENGINE_ROOT_TOKEN
    game_token: str = GAME_ROOT_TOKEN

    @property
    def engine_dir(self) -> Path:
        """The ``Engine`` directory under the engine root."""
        return self.engine_root / "Engine"

    @property
    def has_game(self) -> bool:
        return self.game_root is not None


class BuildTargetSpec(BaseModel):
    """One (target, architecture, configuration) build invocation."""

    model_config = ConfigDict(frozen=True)

    name: str
    architecture: str
    configuration: TargetConfiguration

    @property
    def rule_name(self) -> str:
        return f"{self.name}-{self.architecture}-{self.configuration}"


class GenerationContext(BaseModel):
    """Everything a generation run needs to know, fixed for the run.

    Attributes:
        roots:                Engine root and optional game root.
        master_project_dir:   Where CMakeLists.txt is written.  Relative
                              include paths are expressed against it.
        game_project_file:    The ``.uproject`` file, if generating for a game.
        platform:             Host platform (drives exclusions + build command).
        architecture:         Label used in target rule names.
        valid_configurations: Configurations the build accepts.
    """

    model_config = ConfigDict(frozen=True)

    roots: RootContext
    master_project_dir: Path
    game_project_file: Path | None = None
    platform: HostPlatform
    architecture: str
    valid_configurations: tuple[TargetConfiguration, ...] = Field(
        default=("Debug", "DebugGame", "Development", "Shipping", "Test"),
    )

    @property
    def game_project_name(self) -> str:
        """Bare name of the game project, or empty when none is configured."""
        if self.game_project_file is None:
            return ""
        return self.game_project_file.stem

    def is_valid_configuration(self, configuration: str) -> bool:
        return configuration in self.valid_configurations
