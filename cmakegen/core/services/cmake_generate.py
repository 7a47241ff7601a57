"""CMake descriptor generation — run the pipeline, write, clean."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from cmakegen.adapters.discovery import find_module_source_files
from cmakegen.adapters.shell.filesystem import delete_file, write_file_if_changed
from cmakegen.core.models.context import GenerationContext
from cmakegen.core.models.module import ModuleFile
from cmakegen.core.models.project import GeneratedProject
from cmakegen.core.models.template import GeneratedFile
from cmakegen.core.services.aggregate import Aggregate, aggregate
from cmakegen.core.services.classifier import ClassifiedFiles, classify
from cmakegen.core.services.generators.cmakelists import (
    DESCRIPTOR_FILE_NAME,
    GenerationError,
    UnsupportedPlatformError,
    build_command,
    generate_cmakelists,
)
from cmakegen.core.services.targets import enumerate_targets

logger = logging.getLogger(__name__)

__all__ = [
    "GenerationError",
    "PipelineOutput",
    "UnsupportedPlatformError",
    "clean_descriptor",
    "descriptor_path",
    "run_pipeline",
    "write_descriptor",
]


@dataclass
class PipelineOutput:
    """Everything one generation pass produced, before writing."""

    files: ClassifiedFiles
    aggregate: Aggregate
    target_lines: list[str]
    descriptor: GeneratedFile


def descriptor_path(output_dir: Path) -> Path:
    """Location of the descriptor inside *output_dir*."""
    return output_dir / DESCRIPTOR_FILE_NAME


def run_pipeline(
    context: GenerationContext,
    projects: Sequence[GeneratedProject],
    modules: Sequence[ModuleFile],
    list_files: Callable[[ModuleFile], Iterable[Path]] = find_module_source_files,
) -> PipelineOutput:
    """Classify, aggregate, enumerate and assemble the descriptor.

    The platform is checked first so an unsupported host fails before
    any discovery work.

    Raises:
        UnsupportedPlatformError: If the host platform has no build command.
    """
    build_command(context.platform)

    logger.info(
        "Generating CMake descriptor: %d module(s), %d project(s), platform %s",
        len(modules),
        len(projects),
        context.platform,
    )

    files = classify(modules, list_files, context)
    agg = aggregate(projects, context)
    target_lines = enumerate_targets(projects, context)
    descriptor = generate_cmakelists(context, files, agg, target_lines)

    return PipelineOutput(files=files, aggregate=agg, target_lines=target_lines, descriptor=descriptor)


def write_descriptor(descriptor: GeneratedFile) -> bool:
    """Write the descriptor if its content changed.

    Returns:
        True if the file was written, False if already up to date.

    Raises:
        OSError: If the write fails.
    """
    return write_file_if_changed(Path(descriptor.path), descriptor.content)


def clean_descriptor(output_dir: Path) -> bool:
    """Delete the descriptor in *output_dir*; a missing file is not an error.

    Returns:
        True if a file was removed.
    """
    return delete_file(descriptor_path(output_dir))
