"""
Tests for path normalization — root-token rewriting.

Pure unit tests: no filesystem access.
"""

from pathlib import Path

import pytest

from cmakegen.core.models.context import RootContext
from cmakegen.core.services.paths import (
    clean_separators,
    engine_relative_path,
    is_under_root,
    normalize,
    relative_path,
)

ENGINE_ONLY = RootContext(engine_root=Path("/opt/UE4"))
WITH_GAME = RootContext(engine_root=Path("/opt/UE4"), game_root=Path("/home/dev/MyGame"))


class TestCleanSeparators:
    def test_backslashes(self):
        assert clean_separators("Engine\\Source\\Core.cpp") == "Engine/Source/Core.cpp"

    def test_already_clean(self):
        assert clean_separators("Engine/Source") == "Engine/Source"

    def test_accepts_path(self):
        assert clean_separators(Path("/opt/UE4")) == "/opt/UE4"


class TestRelativePath:
    def test_inside(self):
        assert relative_path("/opt/UE4/Engine/Source", "/opt/UE4") == "Engine/Source"

    def test_outside_escapes(self):
        assert relative_path("/opt/Other/x.h", "/opt/UE4/Engine") == "../../Other/x.h"


class TestIsUnderRoot:
    @pytest.mark.parametrize("rel,expected", [
        ("Source/Core.cpp", True),
        ("../Samples/Foo.cpp", False),
        ("/abs/Foo.cpp", False),
    ])
    def test_cases(self, rel: str, expected: bool):
        assert is_under_root(rel) is expected


class TestEngineRelativePath:
    def test_relative_to_engine_dir(self):
        rel = engine_relative_path("/opt/UE4/Engine/Source/ThirdParty/zlib/zlib.h", ENGINE_ONLY)
        assert rel == "Source/ThirdParty/zlib/zlib.h"


class TestNormalize:
    def test_engine_file(self):
        """A file under Engine/ gets the engine token."""
        result = normalize("/opt/UE4/Engine/Foo/Bar.cpp", ENGINE_ONLY)
        assert result == "${UE4_ROOT_PATH}/Engine/Foo/Bar.cpp"

    def test_engine_file_with_game_configured(self):
        result = normalize("/opt/UE4/Engine/Source/Core.h", WITH_GAME)
        assert result == "${UE4_ROOT_PATH}/Engine/Source/Core.h"

    def test_game_file(self):
        """Outside the engine with a game project → game token."""
        result = normalize("/home/dev/MyGame/Source/MyGame/MyGame.cpp", WITH_GAME)
        assert result == "${GAME_ROOT_PATH}/Source/MyGame/MyGame.cpp"

    def test_outside_engine_without_game_strips_escape(self):
        """No game project → the leading ../ is stripped."""
        result = normalize("/opt/UE4/Samples/Foo/Source/Foo.cpp", ENGINE_ONLY)
        assert result == "Samples/Foo/Source/Foo.cpp"

    def test_is_pure(self):
        path = "/opt/UE4/Engine/Source/Core.cpp"
        assert normalize(path, ENGINE_ONLY) == normalize(path, ENGINE_ONLY)
