"""
Generated file model — the descriptor as produced in memory.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by the generation pipeline.

    Attributes:
        path:      Absolute output path.
        content:   Full file content.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    reason: str = ""
