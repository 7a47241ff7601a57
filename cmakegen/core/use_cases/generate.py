"""
Generate use case — load the manifest, run the pipeline, write the descriptor.

Ties together config loading, module discovery, the generation
pipeline, and the change-aware write.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from cmakegen.adapters.discovery import discover_modules, modules_from_paths
from cmakegen.core.config.loader import (
    ConfigError,
    build_context,
    find_manifest_file,
    load_manifest,
)
from cmakegen.core.models.context import GenerationContext
from cmakegen.core.services.cmake_generate import (
    GenerationError,
    PipelineOutput,
    run_pipeline,
    write_descriptor,
)
from cmakegen.core.services.generators.cmakelists import build_command

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of the generate use case."""

    context: GenerationContext | None = None
    output: PipelineOutput | None = None
    config_path: Path | None = None
    module_count: int = 0
    written: bool = False
    error: str | None = None

    @property
    def output_path(self) -> str | None:
        return self.output.descriptor.path if self.output else None

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["config_path"] = str(self.config_path) if self.config_path else None
        result["output_path"] = self.output_path
        result["written"] = self.written
        result["modules"] = self.module_count

        if self.context:
            result["platform"] = self.context.platform
            result["architecture"] = self.context.architecture

        if self.output:
            result["files"] = {
                "sources": len(self.output.files.sources),
                "headers": len(self.output.files.headers),
                "configs": len(self.output.files.configs),
                "excluded": self.output.files.excluded,
            }
            result["include_directories"] = len(self.output.aggregate.include_directories)
            result["definitions"] = len(self.output.aggregate.definitions)
            result["target_rules"] = len(self.output.target_lines)

        return result


def run_generate(config_path: Path | None = None, write: bool = True) -> GenerateResult:
    """Generate the CMake descriptor described by the manifest.

    Args:
        config_path: Optional explicit path to cmakegen.yml.
        write: Whether to write the descriptor to disk.

    Returns:
        GenerateResult with pipeline output and write status.
    """
    result = GenerateResult()

    try:
        if config_path is None:
            config_path = find_manifest_file()
        if config_path is None:
            result.error = "No cmakegen.yml found."
            return result

        manifest = load_manifest(config_path)
        context = build_context(manifest)
        result.config_path = config_path
        result.context = context
    except ConfigError as e:
        result.error = str(e)
        return result

    # Unsupported hosts fail before the tree walk
    try:
        build_command(context.platform)
    except GenerationError as e:
        result.error = str(e)
        return result

    if manifest.modules:
        modules = modules_from_paths(manifest.modules)
    else:
        modules = discover_modules(context)
    result.module_count = len(modules)

    try:
        result.output = run_pipeline(context, manifest.projects, modules)
    except GenerationError as e:
        result.error = str(e)
        return result

    if write:
        try:
            result.written = write_descriptor(result.output.descriptor)
        except OSError as e:
            result.error = f"Failed to write {result.output_path}: {e}"
            return result

    return result
