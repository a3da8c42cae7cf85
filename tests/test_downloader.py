"""Tests for the episode downloader and its file helpers."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from birdsync.downloader import Downloader
from birdsync.downloader_utils import CSV_HEADER, MetadataWriter, PathManager
from birdsync.models import Episode


@pytest.fixture
def episode() -> Episode:
    return Episode(
        id=42,
        favorite=True,
        title="Backyard",
        recorded_at="2024-01-01 10:00",
        duration=30,
        image_url="http://x/i.jpg",
        video_url="http://x/v.mp4",
    )


def streamed_response(chunks: list[bytes], status_code: int = 200) -> MagicMock:
    """Fake streamed response usable as a context manager."""
    response = MagicMock()
    response.__enter__.return_value = response
    response.__exit__.return_value = None
    response.iter_content.return_value = iter(chunks)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error"
        )
    return response


class TestMetadataWriter:
    """Test CSV metadata files."""

    def test_csv_lines(self, episode: Episode, tmp_path: Path) -> None:
        csv_path = MetadataWriter.create_csv_file(episode, tmp_path / "42.csv")

        lines = csv_path.read_text(encoding="utf-8").split("\n")
        assert lines[0] == CSV_HEADER
        assert (
            lines[1]
            == "42,Backyard,true,2024-01-01 10:00,30 s,http://x/i.jpg,http://x/v.mp4"
        )
        assert lines[2] == ""

    def test_not_favorite_and_float_duration(self, episode: Episode) -> None:
        other = Episode(
            id="abc",
            favorite=False,
            title="Feeder",
            recorded_at="2024-01-02 08:15",
            duration=12.0,
            image_url="i",
            video_url="v",
        )

        assert MetadataWriter.format_row(other) == (
            "abc,Feeder,false,2024-01-02 08:15,12 s,i,v"
        )

    def test_title_commas_are_not_escaped(self, episode: Episode) -> None:
        titled = Episode(**{**episode.__dict__, "title": 'Cardinal, "red"'})

        row = MetadataWriter.format_row(titled)

        assert row.startswith('42,Cardinal, "red",true,')
        assert len(row.split(",")) == 8


class TestPathManager:
    """Test artifact paths."""

    def test_artifact_paths(self, episode: Episode, tmp_path: Path) -> None:
        paths = PathManager.get_artifact_paths(episode, tmp_path)

        assert paths.csv == tmp_path / "42.csv"
        assert paths.thumbnail == tmp_path / "42.jpg"
        assert paths.video == tmp_path / "42.mp4"

    def test_sanitize_filename(self) -> None:
        assert PathManager.sanitize_filename('a/b:c*  d ') == "abc d"


class TestDownloader:
    """Test Downloader class."""

    def test_download_file_streams_to_disk(self, tmp_path: Path) -> None:
        downloader = Downloader(tmp_path, timeout=5)
        target = tmp_path / "42.mp4"
        response = streamed_response([b"abc", b"", b"def"])

        with patch(
            "birdsync.downloader.requests.get", return_value=response
        ) as mock_get:
            assert downloader.download_file("http://x/v.mp4", target) is True

        mock_get.assert_called_once_with("http://x/v.mp4", stream=True, timeout=5)
        assert target.read_bytes() == b"abcdef"

    def test_download_file_http_error(self, tmp_path: Path) -> None:
        downloader = Downloader(tmp_path)
        target = tmp_path / "42.mp4"

        with patch(
            "birdsync.downloader.requests.get",
            return_value=streamed_response([], status_code=403),
        ):
            assert downloader.download_file("http://x/v.mp4", target) is False

        assert not target.exists()

    def test_download_file_network_error(self, tmp_path: Path) -> None:
        downloader = Downloader(tmp_path)

        with patch(
            "birdsync.downloader.requests.get",
            side_effect=requests.ConnectionError("down"),
        ):
            assert downloader.download_file("http://x/v.mp4", tmp_path / "v") is False

    def test_is_downloaded_uses_csv_only(self, episode: Episode, tmp_path: Path) -> None:
        downloader = Downloader(tmp_path)
        assert not downloader.is_downloaded(episode)

        (tmp_path / "42.mp4").write_bytes(b"video")
        assert not downloader.is_downloaded(episode)

        (tmp_path / "42.csv").write_text("x")
        assert downloader.is_downloaded(episode)

    def test_download_episode_order(self, episode: Episode, tmp_path: Path) -> None:
        downloader = Downloader(tmp_path)
        order = []

        def fake_download(url: str, output_path: Path) -> bool:
            assert (tmp_path / "42.csv").exists()
            order.append(output_path.name)
            return True

        with patch.object(downloader, "download_file", side_effect=fake_download):
            result = downloader.download_episode(episode)

        assert order == ["42.jpg", "42.mp4"]
        assert result.success
        assert result.csv_path == tmp_path / "42.csv"
        assert result.error is None

    def test_thumbnail_failure_still_downloads_video(
        self, episode: Episode, tmp_path: Path
    ) -> None:
        downloader = Downloader(tmp_path)

        with patch.object(
            downloader, "download_file", side_effect=[False, True]
        ) as mock_download:
            result = downloader.download_episode(episode)

        assert mock_download.call_count == 2
        assert not result.success
        assert result.thumbnail_ok is False
        assert result.video_ok is True
        assert result.error == "Download failed: thumbnail"

    def test_metadata_failure_skips_transfers(self, episode: Episode, tmp_path: Path) -> None:
        downloader = Downloader(tmp_path / "missing")

        with patch.object(downloader, "download_file") as mock_download:
            result = downloader.download_episode(episode)

        mock_download.assert_not_called()
        assert result.csv_path is None
        assert result.error.startswith("Metadata write failed")
