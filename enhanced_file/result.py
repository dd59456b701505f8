from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of an operation that reports failures without raising.

    Truthiness follows `ok`, so the result can be checked like a boolean.
    """

    ok: bool
    """Whether the operation succeeded"""

    message: str | None = None
    """Diagnostic of a failure, `None` when there is nothing to report"""

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> "OperationResult":
        return cls(True)

    @classmethod
    def failure(cls, message: str | None = None) -> "OperationResult":
        return cls(False, message)
