"""
CMakeLists.txt generator — assemble the descriptor text.

Section order is fixed:

    banner, cmake_minimum_required, project
    UE4_ROOT_PATH, GAME_PROJECT_FILE?, BUILD, GAME_ROOT_PATH?
    SOURCE_FILES, HEADER_FILES, CONFIG_FILES
    include_directories, add_definitions
    target rules, FakeTarget

The whole text is built in memory; writing is left to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cmakegen.core.models.context import GenerationContext
from cmakegen.core.models.template import GeneratedFile
from cmakegen.core.services.aggregate import Aggregate
from cmakegen.core.services.classifier import ClassifiedFiles
from cmakegen.core.services.paths import clean_separators

DESCRIPTOR_FILE_NAME = "CMakeLists.txt"

_BANNER = """\
# Makefile generated by cmakegen (v1.1)
# *DO NOT EDIT*

cmake_minimum_required (VERSION 2.6)
project (UE4)

"""

_SECTION_END = " )\n\n"

_FALLBACK_TARGET = "add_executable(FakeTarget ${SOURCE_FILES})\n"

_UNIX_BUILD = (
    'set(BUILD cd "${{UE4_ROOT_PATH}}" && bash '
    '"${{UE4_ROOT_PATH}}/Engine/Build/BatchFiles/{arch}/Build.sh")\n'
)

# Host platform → build-command template
_BUILD_COMMANDS: dict[str, str] = {
    "Win64": 'set(BUILD cmd /c "${{UE4_ROOT_PATH}}/Engine/Build/BatchFiles/Build.bat")\n',
    "Mac": _UNIX_BUILD,
    "Linux": _UNIX_BUILD,
}


class GenerationError(Exception):
    """Raised when the descriptor cannot be generated."""


class UnsupportedPlatformError(GenerationError):
    """Raised when the host platform has no build-command template."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"CMake descriptor generation does not support platform '{platform}'")
        self.platform = platform


def supported_platforms() -> list[str]:
    """Host platforms with a build-command template."""
    return sorted(_BUILD_COMMANDS.keys())


def build_command(platform: str) -> str:
    """Return the ``set(BUILD ...)`` line for *platform*.

    Raises:
        UnsupportedPlatformError: If the platform has no template.
    """
    template = _BUILD_COMMANDS.get(platform)
    if template is None:
        raise UnsupportedPlatformError(platform)
    return template.format(arch=platform)


def _section(opening: str, lines: Iterable[str]) -> str:
    return opening + "".join(lines) + _SECTION_END


def _file_section(variable: str, paths: Iterable[str]) -> str:
    return _section(f"set({variable} \n", (f'\t"{p}"\n' for p in paths))


def render_header(context: GenerationContext) -> str:
    """Banner plus the root / project / build variables."""
    parts = [
        _BANNER,
        f'set(UE4_ROOT_PATH "{clean_separators(context.roots.engine_root)}")\n',
    ]
    if context.game_project_file is not None:
        parts.append(f'set(GAME_PROJECT_FILE "{clean_separators(context.game_project_file)}")\n')
    parts.append(build_command(context.platform))
    if context.roots.has_game:
        parts.append(f'set(GAME_ROOT_PATH "{clean_separators(context.roots.game_root)}")\n')
    parts.append("\n")
    return "".join(parts)


def render_cmakelists(
    context: GenerationContext,
    files: ClassifiedFiles,
    aggregate: Aggregate,
    target_lines: Sequence[str],
) -> str:
    """Assemble the complete descriptor text."""
    return "".join([
        render_header(context),
        _file_section("SOURCE_FILES", files.sources),
        _file_section("HEADER_FILES", files.headers),
        _file_section("CONFIG_FILES", files.configs),
        _section(
            "include_directories( \n",
            (f'\t"{clean_separators(d)}"\n' for d in aggregate.include_directories),
        ),
        _section("add_definitions( \n", (f"\t-D{d}\n" for d in aggregate.definitions)),
        *target_lines,
        _FALLBACK_TARGET,
    ])


def generate_cmakelists(
    context: GenerationContext,
    files: ClassifiedFiles,
    aggregate: Aggregate,
    target_lines: Sequence[str],
) -> GeneratedFile:
    """Build the descriptor as a GeneratedFile in the master-project dir."""
    output = context.master_project_dir / DESCRIPTOR_FILE_NAME
    return GeneratedFile(
        path=str(output),
        content=render_cmakelists(context, files, aggregate, target_lines),
        reason=(
            f"CMake descriptor for {context.platform}: {len(files.sources)} source(s), "
            f"{len(target_lines)} target rule(s)"
        ),
    )
