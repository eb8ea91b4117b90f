"""Assertions useful when writing scenarios."""

from sceneplay.testing.types import Task


def assert_raises(task: Task, expected: type[BaseException] = Exception) -> BaseException:
    """Assert that ``task`` raises, and return what it raised.

    Args:
        task: No-argument callable that is supposed to raise.
        expected: Exception type to catch. Anything else propagates.

    Raises:
        AssertionError: If ``task`` completes without raising.

    Example:
        error = assert_raises(lambda: [].pop())
        assert isinstance(error, IndexError)
    """
    try:
        task()
    except expected as e:
        return e
    raise AssertionError("task did not raise an exception")
