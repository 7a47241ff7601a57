"""
Shared test fixtures and configuration.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from cmakegen.core.models.context import GenerationContext
from tests.helpers import GAME_ROOT, make_context


@pytest.fixture
def context() -> GenerationContext:
    """Linux context for an engine-only checkout at /opt/UE4."""
    return make_context()


@pytest.fixture
def game_context() -> GenerationContext:
    """Linux context with a MyGame project next to the engine."""
    return make_context(game_project=GAME_ROOT / "MyGame.uproject")


@pytest.fixture
def make_tree() -> Callable[[Path, list[str]], None]:
    """Return a helper that creates empty files under a root."""

    def _make(root: Path, files: list[str]) -> None:
        for rel in files:
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding="utf-8")

    return _make


@pytest.fixture
def engine_tree(tmp_path: Path, make_tree) -> Path:
    """A small engine checkout on disk; returns the engine root."""
    root = tmp_path / "UE4"
    make_tree(root, [
        "Engine/Source/Runtime/Core/Core.Build.cs",
        "Engine/Source/Runtime/Core/Private/Core.cpp",
        "Engine/Source/Runtime/Core/Private/Windows/WindowsPlatform.cpp",
        "Engine/Source/Runtime/Core/Public/Core.h",
        "Engine/Source/Runtime/Core/Public/Core.inl",
        "Engine/Source/Runtime/Core/Intermediate/Generated.cpp",
        "Engine/Source/Runtime/Launch/Launch.Build.cs",
        "Engine/Source/Runtime/Launch/Private/Launch.cpp",
        "Engine/Source/ThirdParty/zlib/zlib.Build.cs",
        "Engine/Source/ThirdParty/zlib/zlib.h",
        "Engine/Source/UE4Editor.Target.cs",
    ])
    return root
