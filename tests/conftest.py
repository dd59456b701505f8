from pathlib import Path
from typing import Any

import pytest
from loguru import logger

from enhanced_file.file_handler import MockFileSystem


@pytest.fixture
def log_records():
    records: list[dict[str, Any]] = []
    handler_id = logger.add(lambda msg: records.append(msg.record), level="DEBUG")

    yield records

    logger.remove(handler_id)


@pytest.fixture
def mock_fs() -> MockFileSystem:
    file_system = MockFileSystem()
    file_system.mkdir("/data")
    file_system.mkdir("/data/archive")
    file_system.save("/data/report.txt", "report")
    return file_system


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    filepath = tmp_path / "a.txt"
    filepath.write_text("content")
    return filepath

