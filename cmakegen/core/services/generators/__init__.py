"""
Generators — produce descriptor text from the classified/aggregated pipeline output.

Each generator module exposes a builder that returns a ``GeneratedFile``.
Nothing here touches the filesystem.
"""
