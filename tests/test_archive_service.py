"""
Tests for ImageArchiver.

Images are written with OpenCV into a temporary archive directory.
"""

import re
from datetime import datetime

import cv2
import numpy as np
import pytest

from feeder.services import archive_service
from feeder.services.archive_service import ImageArchiver, build_archive_filename

FIXED_TIME = datetime(2024, 1, 20, 7, 5, 9)


@pytest.fixture
def archive_dir(tmp_path):
    return tmp_path / "archive"


@pytest.fixture
def archiver(archive_dir, feeder_log):
    return ImageArchiver(archive_dir, log=feeder_log, clock=lambda: FIXED_TIME)


def test_filename_prefix_follows_outcome():
    assert build_archive_filename(True, FIXED_TIME) == "fish_2024-01-20_07-05-09.jpg"
    assert build_archive_filename(False, FIXED_TIME) == "no_fish_2024-01-20_07-05-09.jpg"


def test_save_creates_missing_archive_once(archiver, archive_dir, frame, caplog):
    assert not archive_dir.exists()

    first = archiver.save_image(frame, True)
    second = archiver.save_image(frame, False)

    assert first.success and second.success
    assert archive_dir.is_dir()
    created = [r for r in caplog.records if "Created archive directory" in r.getMessage()]
    assert len(created) == 1


def test_saved_file_is_readable_jpeg(archiver, archive_dir, frame):
    result = archiver.save_image(frame, True)

    assert result.path == archive_dir / "fish_2024-01-20_07-05-09.jpg"
    loaded = cv2.imread(str(result.path))
    assert loaded is not None
    assert loaded.shape == frame.shape


def test_real_clock_filename_format(archive_dir, feeder_log, frame):
    archiver = ImageArchiver(archive_dir, log=feeder_log)

    result = archiver.save_image(frame, False)

    assert re.fullmatch(
        r"no_fish_\d{4}-\d{2}-\d{2}_\d{2}-\d{2}-\d{2}\.jpg", result.filename
    )
    assert result.path.parent == archive_dir


def test_same_second_same_outcome_overwrites(archiver, archive_dir, frame):
    archiver.save_image(frame, True)
    archiver.save_image(np.full_like(frame, 255), True)

    assert [p.name for p in archive_dir.iterdir()] == ["fish_2024-01-20_07-05-09.jpg"]


def test_directory_creation_failure_abandons_save(tmp_path, feeder_log, errors, frame):
    blocker = tmp_path / "archive"
    blocker.write_text("not a directory", encoding="utf-8")
    archiver = ImageArchiver(blocker, log=feeder_log, clock=lambda: FIXED_TIME)

    result = archiver.save_image(frame, True)

    assert result.success is False
    assert result.path is None
    assert len(errors()) == 1


def test_write_failure_is_reported(archiver, monkeypatch, errors, frame):
    monkeypatch.setattr(archive_service.cv2, "imwrite", lambda *_args: False)

    result = archiver.save_image(frame, True)

    assert result.success is False
    assert len(errors()) == 1
    assert "Could not save image" in errors()[0].getMessage()


def test_write_exception_is_contained(archiver, errors):
    empty = np.zeros((0, 0, 3), dtype=np.uint8)

    result = archiver.save_image(empty, False)

    assert result.success is False
    assert len(errors()) == 1


class TestClear:
    def test_clear_removes_archived_files(self, archiver, archive_dir, frame):
        archiver.save_image(frame, True)
        archiver.save_image(frame, False)

        assert archiver.clear() == 2
        assert list(archive_dir.iterdir()) == []

    def test_clear_creates_missing_archive(self, archiver, archive_dir):
        assert archiver.clear() == 0
        assert archive_dir.is_dir()
