"""
CSV metadata file creation
"""

import logging
from pathlib import Path

from ..models import Episode
from ..utils import format_duration, format_favorite

logger = logging.getLogger(__name__)

CSV_HEADER = "id,title,favorite,uploaded,duration,thumbnail,video"


class MetadataWriter:
    """Creates the one-row CSV metadata file of an episode"""

    @staticmethod
    def format_row(episode: Episode) -> str:
        """
        Build the data row of the metadata file

        Fields are joined with commas as-is: a title containing a comma
        or a quote shifts the columns of that row.
        """
        fields = [
            str(episode.id),
            episode.title,
            format_favorite(episode.favorite),
            episode.recorded_at,
            format_duration(episode.duration),
            episode.image_url,
            episode.video_url,
        ]
        return ",".join(fields)

    @staticmethod
    def create_csv_file(episode: Episode, csv_path: Path) -> Path:
        """
        Write the header and data row of an episode to ``csv_path``

        Returns:
            Path to the created CSV file
        """
        try:
            with open(csv_path, "w", encoding="utf-8", newline="") as f:
                f.write(f"{CSV_HEADER}\n")
                f.write(f"{MetadataWriter.format_row(episode)}\n")
            logger.info(f"Created metadata file: {csv_path}")
            return csv_path
        except OSError as e:
            logger.error(f"Failed to create metadata file: {e}")
            raise
