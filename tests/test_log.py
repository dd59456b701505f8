import sys
from pathlib import Path

import pytest
from loguru import logger

from enhanced_file.define import LOG_DIR_ENV, LOG_FILENAME, LOG_LEVEL_ENV
from enhanced_file.enhanced_file import EnhancedFile
from enhanced_file.log import setup_logging


@pytest.fixture(autouse=True)
def restore_default_handler(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(LOG_DIR_ENV, raising=False)

    yield

    logger.remove()
    logger.add(sys.stderr)


class TestSetupLogging:
    def test_stderr_sink(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        handler_ids = setup_logging("error")

        EnhancedFile(tmp_path, "nofile.txt").delete()
        logger.warning("below threshold")

        stderr = capsys.readouterr().err
        assert len(handler_ids) == 1
        assert f"{tmp_path / 'nofile.txt'} was not deleted." in stderr
        assert "below threshold" not in stderr

    def test_level_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "warning")

        setup_logging()
        logger.info("hidden")
        logger.warning("shown")

        stderr = capsys.readouterr().err
        assert "hidden" not in stderr
        assert "shown" in stderr

    def test_file_sink(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "log"

        handler_ids = setup_logging("info", log_dir)
        logger.info("written to file")
        for handler_id in handler_ids:
            logger.remove(handler_id)

        assert "written to file" in (log_dir / LOG_FILENAME).read_text()

    def test_log_dir_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(LOG_DIR_ENV, str(tmp_path))

        handler_ids = setup_logging()

        assert len(handler_ids) == 2
        assert (tmp_path / LOG_FILENAME).exists()
