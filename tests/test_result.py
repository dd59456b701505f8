from dataclasses import FrozenInstanceError

import pytest

from enhanced_file.result import OperationResult


class TestOperationResult:
    def test_success_is_truthy(self) -> None:
        result = OperationResult.success()

        assert result
        assert result.ok is True
        assert result.message is None

    def test_failure_is_falsy(self) -> None:
        result = OperationResult.failure("/tmp/a.txt was not deleted.")

        assert not result
        assert result.ok is False
        assert result.message == "/tmp/a.txt was not deleted."

    def test_failure_without_message(self) -> None:
        assert OperationResult.failure() == OperationResult(False, None)

    def test_frozen(self) -> None:
        result = OperationResult.success()

        with pytest.raises(FrozenInstanceError):
            result.ok = False  # type: ignore[misc]
