"""
Test helpers shared across modules.
"""

from pathlib import Path

from cmakegen.core.models.context import GenerationContext, RootContext

ENGINE_ROOT = Path("/opt/UE4")
GAME_ROOT = Path("/home/dev/MyGame")


def make_context(
    platform: str = "Linux",
    *,
    engine_root: Path = ENGINE_ROOT,
    game_project: Path | None = None,
    master_project_dir: Path | None = None,
    valid_configurations: tuple[str, ...] | None = None,
) -> GenerationContext:
    """Build a GenerationContext with sensible test defaults."""
    game_root = game_project.parent if game_project else None
    kwargs: dict = {}
    if valid_configurations is not None:
        kwargs["valid_configurations"] = valid_configurations
    return GenerationContext(
        roots=RootContext(engine_root=engine_root, game_root=game_root),
        master_project_dir=master_project_dir or engine_root,
        game_project_file=game_project,
        platform=platform,
        architecture=platform,
        **kwargs,
    )
