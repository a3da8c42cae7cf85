"""
Downloader package - Episode artifact helpers
"""

from .metadata import CSV_HEADER, MetadataWriter
from .paths import ArtifactPaths, PathManager

__all__ = [
    "ArtifactPaths",
    "CSV_HEADER",
    "MetadataWriter",
    "PathManager",
]
