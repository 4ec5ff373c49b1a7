"""Voxel world model: block types, chunks, vectors, player movement and visible-face rendering."""

__version__ = "0.1.0"
__all__ = ["block", "chunk", "vector", "player", "renderer"]