from .description import Description
from .result import RunResult, TestExecution, TestResult, TestStatus


__all__ = [
    "Description",
    "RunResult",
    "TestExecution",
    "TestResult",
    "TestStatus",
]
