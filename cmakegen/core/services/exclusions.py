"""
Platform exclusion policy — which discovered paths to hide per host.

Filtering is minimal on purpose: looking up symbols from other
platforms is useful in the IDE.  Only third-party trees and, on Mac,
Windows/Linux-only code are hidden.
"""

from __future__ import annotations

_THIRD_PARTY = "Source/ThirdParty/"

# Platform → path substrings that exclude a file.  Platforms missing
# from the table exclude nothing.
EXCLUSION_MARKERS: dict[str, tuple[str, ...]] = {
    "Win64": (_THIRD_PARTY,),
    "Linux": (_THIRD_PARTY,),
    "Mac": (
        _THIRD_PARTY,
        "/Windows/",
        "/Linux/",
        "/VisualStudioSourceCodeAccess/",
        "/WmfMedia/",
        "/WindowsDeviceProfileSelector/",
        "/WindowsMoviePlayer/",
        "/WinRT/",
    ),
}


def is_excluded(root_relative_path: str, platform: str) -> bool:
    """Return True if *root_relative_path* is hidden on *platform*."""
    markers = EXCLUSION_MARKERS.get(platform, ())
    path = root_relative_path.replace("\\", "/")
    return any(marker in path for marker in markers)
