"""Scenario declaration, replay and running.

Tests are declared as a tree of subjects, actions and tests and every test
is run by replaying the path leading to it.
"""

from .catalog import ScenarioTest, TestCatalog
from .discovery import collect
from .errors import DiscoveryError, SceneplayError, StructureError, TestFailure, ensure
from .models import Description, RunResult, TestExecution, TestResult, TestStatus
from .path import PathKey
from .runner import Runner, run_scenarios
from .scenario import Scenario


__all__ = [
    "Description",
    "DiscoveryError",
    "PathKey",
    "RunResult",
    "Runner",
    "Scenario",
    "ScenarioTest",
    "SceneplayError",
    "StructureError",
    "TestCatalog",
    "TestExecution",
    "TestFailure",
    "TestResult",
    "TestStatus",
    "collect",
    "ensure",
    "run_scenarios",
]
