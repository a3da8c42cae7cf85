"""
Download module for episode metadata, thumbnails and videos
"""

import logging
from pathlib import Path

import requests

from .downloader_utils import ArtifactPaths, MetadataWriter, PathManager
from .models import DownloadResult, Episode

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


class Downloader:
    """Writes the CSV/JPEG/MP4 triple of an episode to the download directory"""

    def __init__(self, output_directory: Path, timeout: float | None = None):
        self.output_directory = Path(output_directory)
        self.timeout = timeout

    def get_artifact_paths(self, episode: Episode) -> ArtifactPaths:
        return PathManager.get_artifact_paths(episode, self.output_directory)

    def is_downloaded(self, episode: Episode) -> bool:
        """An episode counts as downloaded as soon as its CSV file exists"""
        return self.get_artifact_paths(episode).csv.exists()

    def download_file(self, url: str, output_path: Path) -> bool:
        """
        Stream a remote file to ``output_path``

        The file is closed before this returns, whatever the outcome.

        Returns:
            True if successful, False otherwise
        """
        try:
            with requests.get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                with open(output_path, "wb") as f:
                    for chunk in response.iter_content(CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
            return True
        except (requests.RequestException, OSError) as e:
            logger.error(f"Failed to download {url} to {output_path}: {e}")
            return False

    def download_episode(self, episode: Episode) -> DownloadResult:
        """
        Write the metadata file, then the thumbnail, then the video

        A failed thumbnail does not prevent the video download. A failed
        metadata write stops the episode before any network transfer.
        """
        paths = self.get_artifact_paths(episode)
        result = DownloadResult(episode=episode)

        logger.info(f"Metadata:  {paths.csv}")
        try:
            result.csv_path = MetadataWriter.create_csv_file(episode, paths.csv)
        except OSError as e:
            result.error = f"Metadata write failed: {e}"
            return result

        logger.info(f"Thumbnail: {paths.thumbnail}")
        result.thumbnail_ok = self.download_file(episode.image_url, paths.thumbnail)

        logger.info(f"Video:     {paths.video}")
        result.video_ok = self.download_file(episode.video_url, paths.video)

        failed = [
            name
            for name, ok in (
                ("thumbnail", result.thumbnail_ok),
                ("video", result.video_ok),
            )
            if not ok
        ]
        if failed:
            result.error = f"Download failed: {', '.join(failed)}"

        return result
