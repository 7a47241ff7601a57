"""
Target enumeration — one build rule per (target, architecture, configuration).

Rules are emitted in project order, then target order, then
configuration declaration order.  Stable ordering keeps diffs of the
generated descriptor small.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from cmakegen.core.models.context import (
    CONFIGURATIONS,
    DEFAULT_CONFIGURATION,
    GAME_PROJECT_FILE_TOKEN,
    UNKNOWN_CONFIGURATION,
    BuildTargetSpec,
    GenerationContext,
)
from cmakegen.core.models.project import GeneratedProject

logger = logging.getLogger(__name__)

EDITOR_SUFFIX = "Editor"

PROJECT_ARG = f'-project="{GAME_PROJECT_FILE_TOKEN}"'

# Passes extra arguments through from the IDE invocation.
_EXTRA_ARGS = "$(ARGS)"

_DEFAULT_SOURCES = "SOURCES ${SOURCE_FILES} ${HEADER_FILES} ${CONFIG_FILES}"


def project_argument(target_name: str, context: GenerationContext) -> str:
    """Project-file argument for *target_name*, or ``""``.

    Only the game's own target and its editor variant need it.
    """
    game_name = context.game_project_name
    if game_name and target_name in (game_name, game_name + EDITOR_SUFFIX):
        return PROJECT_ARG
    return ""


def iter_target_names(projects: Sequence[GeneratedProject]) -> Iterator[str]:
    """Bare names of every target with a target file, in listed order."""
    for project in projects:
        for target in project.targets:
            name = target.bare_name
            if name is None:
                continue
            yield name


def iter_build_specs(
    target_name: str,
    context: GenerationContext,
    architecture: str | None = None,
) -> Iterator[BuildTargetSpec]:
    """Per-configuration build specs for one target.

    Skips ``Unknown`` and the default configuration, and any
    configuration the build doesn't accept.
    """
    arch = architecture or context.architecture
    for configuration in CONFIGURATIONS:
        if configuration in (UNKNOWN_CONFIGURATION, DEFAULT_CONFIGURATION):
            continue
        if not context.is_valid_configuration(configuration):
            continue
        yield BuildTargetSpec(name=target_name, architecture=arch, configuration=configuration)


def build_rule(spec: BuildTargetSpec, project_arg: str) -> str:
    return (
        f"add_custom_target({spec.rule_name} ${{BUILD}} {spec.name} "
        f"{spec.architecture} {spec.configuration} {project_arg} {_EXTRA_ARGS})\n"
    )


def default_rule(target_name: str, architecture: str, project_arg: str) -> str:
    return (
        f"add_custom_target({target_name} ${{BUILD}} {target_name} {architecture} "
        f"{DEFAULT_CONFIGURATION} {project_arg} {_EXTRA_ARGS} {_DEFAULT_SOURCES})\n\n"
    )


def enumerate_targets(
    projects: Sequence[GeneratedProject],
    context: GenerationContext,
    architecture: str | None = None,
) -> list[str]:
    """Produce every build-rule line for *projects*.

    Args:
        projects: Generated projects, in generation order.
        context: Generation context.
        architecture: Host architecture label (default: from context).

    Returns:
        Build-rule lines, each newline-terminated.
    """
    arch = architecture or context.architecture
    lines: list[str] = []

    for target_name in iter_target_names(projects):
        project_arg = project_argument(target_name, context)
        for spec in iter_build_specs(target_name, context, arch):
            lines.append(build_rule(spec, project_arg))
        lines.append(default_rule(target_name, arch, project_arg))

    logger.debug("Enumerated %d build rule(s)", len(lines))
    return lines
