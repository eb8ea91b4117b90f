"""Reporter interface notified while scenarios run."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from sceneplay.testing.models import Description, RunResult


class Reporter:
    """Receives run notifications. Every hook is a no-op by default.

    For each test a reporter sees ``on_test_start``, then ``on_test_failure``
    if the test failed, then always ``on_test_finish``.
    """

    def on_collection_complete(self, description: Description) -> None:
        pass

    def on_test_start(self, description: Description) -> None:
        pass

    def on_test_failure(self, description: Description, error: BaseException) -> None:
        pass

    def on_test_finish(self, description: Description, duration_ms: float) -> None:
        pass

    def on_run_complete(self, run_result: RunResult) -> None:
        pass
