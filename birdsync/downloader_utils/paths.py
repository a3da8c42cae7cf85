"""
Path management utilities for downloaded episodes
"""

import re
from dataclasses import dataclass
from pathlib import Path

from ..models import Episode


@dataclass(frozen=True)
class ArtifactPaths:
    """The three sibling files written for one episode"""

    csv: Path
    thumbnail: Path
    video: Path


class PathManager:
    """Manages paths and filenames for downloaded episodes"""

    @staticmethod
    def sanitize_filename(filename: str) -> str:
        """Clean a filename to make it compatible with filesystems"""
        # Replace invalid characters
        filename = re.sub(r'[<>:"/\\|?*]', "", filename)
        # Replace multiple spaces
        filename = re.sub(r"\s+", " ", filename)
        return filename.strip()

    @staticmethod
    def build_base_filename(episode: Episode) -> str:
        """Base filename shared by the artifacts of an episode: its id"""
        return PathManager.sanitize_filename(str(episode.id))

    @staticmethod
    def get_artifact_paths(episode: Episode, output_directory: Path) -> ArtifactPaths:
        """
        Build the metadata, thumbnail and video paths of an episode
        Format: <id>.csv, <id>.jpg, <id>.mp4
        """
        base_filename = PathManager.build_base_filename(episode)
        return ArtifactPaths(
            csv=output_directory / f"{base_filename}.csv",
            thumbnail=output_directory / f"{base_filename}.jpg",
            video=output_directory / f"{base_filename}.mp4",
        )
