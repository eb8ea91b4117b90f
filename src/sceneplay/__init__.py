"""Sceneplay - subject, action and test scenarios with isolated replay."""

from .asserts import assert_raises
from .reports import ConsoleReporter, Reporter
from .testing import Runner, Scenario, StructureError, collect, run_scenarios
from .version import __version__


__all__ = [
    # Core testing
    "Scenario",
    "StructureError",
    "assert_raises",
    # Running
    "Runner",
    "collect",
    "run_scenarios",
    # Reporting
    "Reporter",
    "ConsoleReporter",
    "__version__",
]
