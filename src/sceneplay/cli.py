from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import RunConfig
from .reports import ConsoleReporter
from .testing import Runner, StructureError, collect, run_scenarios
from .testing.errors import DiscoveryError


EXIT_OK = 0
EXIT_TESTS_FAILED = 1
EXIT_USAGE_ERROR = 2


class CLIApplication:
    """Top-level command router."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.parser = argparse.ArgumentParser(
            prog="sceneplay",
            description="Discover and run subject/action/test scenarios.",
        )
        subparsers = self.parser.add_subparsers(dest="command", required=True)
        run = subparsers.add_parser("run", help="Run every test of the collected scenarios.")
        self._add_common_arguments(run)
        run.add_argument(
            "-v",
            "--verbose",
            dest="verbose",
            action="count",
            default=0,
            help="One line per test; repeat for debug logging.",
        )
        run.add_argument(
            "-q",
            "--quiet",
            dest="quiet",
            action="store_true",
            help="Only report failures.",
        )
        run.add_argument(
            "--show-locals",
            dest="show_locals",
            action="store_true",
            default=None,
            help="Show local variables in failure tracebacks.",
        )
        listing = subparsers.add_parser("list", help="List the tests of the collected scenarios.")
        self._add_common_arguments(listing)

    @staticmethod
    def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "path",
            nargs="?",
            default=None,
            help="File or directory to collect scenarios from (default: current directory).",
        )
        parser.add_argument(
            "--pattern",
            dest="pattern",
            help="Glob for scenario files (default: scenario_*.py).",
        )
        parser.add_argument(
            "--config",
            dest="config_path",
            help="JSON file with run options.",
        )
        parser.add_argument(
            "--log-level",
            dest="log_level",
            help="Logging level (DEBUG, INFO, WARNING, ...).",
        )

    def run(self, argv: Sequence[str] | None = None) -> int:
        load_dotenv(Path.cwd() / ".env")
        args = self.parser.parse_args(argv)
        command = RunCommand if args.command == "run" else ListCommand
        try:
            config = self._build_config(args)
        except (ValidationError, json.JSONDecodeError, OSError) as e:
            self.console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
            return EXIT_USAGE_ERROR
        self._configure_logging(config)

        try:
            return command(self.console, config).run()
        except (StructureError, DiscoveryError) as e:
            self.console.print(f"[red]{type(e).__name__}: {escape(str(e))}[/red]")
            return EXIT_USAGE_ERROR

    @staticmethod
    def _build_config(args: argparse.Namespace) -> RunConfig:
        config = RunConfig.from_file(args.config_path) if args.config_path else RunConfig()

        verbosity = None
        if getattr(args, "quiet", False):
            verbosity = -1
        elif getattr(args, "verbose", 0):
            verbosity = min(args.verbose, 2)
        log_level = args.log_level
        if log_level is None and verbosity == 2:
            log_level = "DEBUG"

        return config.merged(
            path=args.path,
            pattern=args.pattern,
            verbosity=verbosity,
            show_locals=getattr(args, "show_locals", None),
            log_level=log_level,
        )

    def _configure_logging(self, config: RunConfig) -> None:
        if config.log_level:
            level = config.log_level
        elif config.verbosity >= 1:
            level = "INFO"
        else:
            level = "WARNING"
        logging.basicConfig(
            level=level,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            force=True,
        )


class RunCommand:
    """Driver for `sceneplay run`."""

    def __init__(self, console: Console, config: RunConfig) -> None:
        self.console = console
        self.config = config

    def run(self) -> int:
        scenario_classes = collect(self.config.path, pattern=self.config.pattern)
        reporter = ConsoleReporter(
            self.console,
            verbosity=self.config.verbosity,
            show_locals=self.config.show_locals,
        )
        result = run_scenarios(scenario_classes, [reporter])
        return EXIT_OK if result.ok else EXIT_TESTS_FAILED


class ListCommand:
    """Driver for `sceneplay list`."""

    def __init__(self, console: Console, config: RunConfig) -> None:
        self.console = console
        self.config = config

    def run(self) -> int:
        for scenario_class in collect(self.config.path, pattern=self.config.pattern):
            description = Runner(scenario_class).description
            for child in description.children:
                self.console.print(escape(child.display_name), highlight=False)
        return EXIT_OK


def main() -> None:
    raise SystemExit(CLIApplication().run())
