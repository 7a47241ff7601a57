"""
Domain models — Pydantic types for the descriptor generator.

All models are re-exported here for convenient access:

    from cmakegen.core.models import GenerationContext, GeneratedProject, ModuleFile
"""

from cmakegen.core.models.context import (
    CONFIGURATIONS,
    PLATFORMS,
    BuildTargetSpec,
    GenerationContext,
    RootContext,
)
from cmakegen.core.models.module import DiscoveredFile, ModuleFile
from cmakegen.core.models.project import GeneratedProject, Manifest, ProjectTarget
from cmakegen.core.models.template import GeneratedFile

__all__ = [
    # context.py
    "BuildTargetSpec",
    "CONFIGURATIONS",
    # module.py
    "DiscoveredFile",
    # template.py
    "GeneratedFile",
    # project.py
    "GeneratedProject",
    "GenerationContext",
    "Manifest",
    "ModuleFile",
    "PLATFORMS",
    "ProjectTarget",
    "RootContext",
]
