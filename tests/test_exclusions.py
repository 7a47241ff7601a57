"""
Tests for the platform exclusion policy.
"""

import pytest

from cmakegen.core.services.exclusions import EXCLUSION_MARKERS, is_excluded


class TestThirdParty:
    @pytest.mark.parametrize("platform", ["Win64", "Linux", "Mac"])
    def test_excluded_everywhere(self, platform: str):
        assert is_excluded("Source/ThirdParty/zlib/zlib.h", platform)

    def test_backslash_path(self):
        assert is_excluded("Source\\ThirdParty\\zlib\\zlib.h", "Linux")


class TestMac:
    @pytest.mark.parametrize("path", [
        "Source/Runtime/Core/Private/Windows/WindowsPlatform.cpp",
        "Source/Runtime/Core/Private/Linux/LinuxPlatform.cpp",
        "Plugins/Developer/VisualStudioSourceCodeAccess/Source/Module.cpp",
        "Plugins/Media/WmfMedia/Source/WmfMedia.cpp",
        "Plugins/Runtime/WindowsDeviceProfileSelector/Source/Selector.cpp",
        "Plugins/Runtime/WindowsMoviePlayer/Source/Player.cpp",
        "Source/Runtime/Core/Private/WinRT/WinRTPlatform.h",
    ])
    def test_windows_and_linux_code_hidden(self, path: str):
        assert is_excluded(path, "Mac")

    def test_mac_code_kept(self):
        assert not is_excluded("Source/Runtime/Core/Private/Mac/MacPlatform.cpp", "Mac")


class TestMinimalFiltering:
    @pytest.mark.parametrize("platform", ["Win64", "Linux"])
    def test_other_platform_code_kept(self, platform: str):
        """Cross-platform symbol lookup keeps Windows/Linux folders visible."""
        assert not is_excluded("Source/Runtime/Core/Private/Windows/WindowsPlatform.cpp", platform)
        assert not is_excluded("Source/Runtime/Core/Private/Mac/MacPlatform.cpp", platform)


class TestUnknownPlatform:
    @pytest.mark.parametrize("platform", ["PS4", "Android", "Amiga"])
    def test_fails_open(self, platform: str):
        assert platform not in EXCLUSION_MARKERS
        assert not is_excluded("Source/ThirdParty/zlib/zlib.h", platform)
