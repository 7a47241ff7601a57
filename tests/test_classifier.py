"""
Tests for the file classifier — bucketing, exclusion, ordering.

The source enumeration collaborator is replaced by a dict lookup,
so these tests never touch the filesystem.
"""

from pathlib import Path

import pytest

from cmakegen.core.models.module import ModuleFile
from cmakegen.core.services.classifier import ClassifiedFiles, categorize, classify

from tests.helpers import make_context

CORE = ModuleFile(path=Path("/opt/UE4/Engine/Source/Runtime/Core/Core.Build.cs"))
LAUNCH = ModuleFile(path=Path("/opt/UE4/Engine/Source/Runtime/Launch/Launch.Build.cs"))
GAME = ModuleFile(path=Path("/home/dev/MyGame/Source/MyGame/MyGame.Build.cs"))

FILES = {
    CORE: [
        Path("/opt/UE4/Engine/Source/Runtime/Core/Core.Build.cs"),
        Path("/opt/UE4/Engine/Source/Runtime/Core/Private/Core.cpp"),
        Path("/opt/UE4/Engine/Source/Runtime/Core/Private/Windows/WindowsPlatform.cpp"),
        Path("/opt/UE4/Engine/Source/Runtime/Core/Public/Core.h"),
        Path("/opt/UE4/Engine/Source/Runtime/Core/Public/Core.inl"),
        Path("/opt/UE4/Engine/Source/Runtime/Core/README.md"),
        Path("/opt/UE4/Engine/Source/ThirdParty/zlib/zlib.h"),
    ],
    LAUNCH: [
        Path("/opt/UE4/Engine/Source/Runtime/Launch/Private/Launch.cpp"),
        Path("/opt/UE4/Engine/Source/Runtime/Launch/Launch.Build.cs"),
    ],
    GAME: [
        Path("/home/dev/MyGame/Source/MyGame/MyGame.cpp"),
        Path("/home/dev/MyGame/Source/MyGame/MyGame.h"),
    ],
}


def _list_files(module: ModuleFile) -> list[Path]:
    return FILES[module]


class TestCategorize:
    @pytest.mark.parametrize("name,expected", [
        ("Core.cpp", "source"),
        ("Core.h", "header"),
        ("Core.Build.cs", "config"),
        ("UE4Editor.Target.cs", "config"),
        ("Core.inl", None),
        ("Core.hpp", None),
        ("README.md", None),
    ])
    def test_extensions(self, name: str, expected):
        assert categorize(name) == expected


class TestClassify:
    def test_buckets(self, context):
        result = classify([CORE], _list_files, context)

        assert result.sources == [
            "${UE4_ROOT_PATH}/Engine/Source/Runtime/Core/Private/Core.cpp",
            "${UE4_ROOT_PATH}/Engine/Source/Runtime/Core/Private/Windows/WindowsPlatform.cpp",
        ]
        assert result.headers == ["${UE4_ROOT_PATH}/Engine/Source/Runtime/Core/Public/Core.h"]
        assert result.configs == ["${UE4_ROOT_PATH}/Engine/Source/Runtime/Core/Core.Build.cs"]

    def test_third_party_excluded(self, context):
        result = classify([CORE], _list_files, context)
        all_paths = result.sources + result.headers + result.configs
        assert not any("Source/ThirdParty/" in p for p in all_paths)
        assert result.excluded == 1

    def test_unknown_extensions_ignored(self, context):
        result = classify([CORE], _list_files, context)
        all_paths = result.sources + result.headers + result.configs
        assert not any(p.endswith((".inl", ".md")) for p in all_paths)

    def test_mac_hides_windows_folders(self):
        result = classify([CORE], _list_files, make_context("Mac"))
        assert not any("/Windows/" in p for p in result.sources + result.headers)
        assert result.excluded == 2

    def test_discovery_order_preserved(self, context):
        """Module order first, then file order; nothing is sorted."""
        result = classify([LAUNCH, CORE], _list_files, context)
        assert result.sources[0].endswith("Launch/Private/Launch.cpp")
        assert result.configs == [
            "${UE4_ROOT_PATH}/Engine/Source/Runtime/Launch/Launch.Build.cs",
            "${UE4_ROOT_PATH}/Engine/Source/Runtime/Core/Core.Build.cs",
        ]

    def test_game_files_use_game_token(self, game_context):
        result = classify([GAME], _list_files, game_context)
        assert result.sources == ["${GAME_ROOT_PATH}/Source/MyGame/MyGame.cpp"]
        assert result.headers == ["${GAME_ROOT_PATH}/Source/MyGame/MyGame.h"]

    def test_deterministic(self, context):
        first = classify([CORE, LAUNCH], _list_files, context)
        second = classify([CORE, LAUNCH], _list_files, context)
        assert first.to_dict() == second.to_dict()

    def test_empty(self, context):
        result = classify([], _list_files, context)
        assert result.total == 0


class TestClassifiedFiles:
    def test_to_dict(self):
        files = ClassifiedFiles(sources=["a.cpp"], headers=["a.h"], configs=[], excluded=3)
        d = files.to_dict()
        assert d["total"] == 2
        assert d["excluded"] == 3
        assert d["sources"] == ["a.cpp"]
