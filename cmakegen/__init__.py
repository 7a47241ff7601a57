"""cmakegen — CMake project descriptor generator for engine/game build graphs."""

__version__ = "0.1.0"
