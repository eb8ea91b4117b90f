"""Tests for declaring scenarios (the discovery pass)."""

import pytest

from sceneplay.testing import PathKey, Scenario, StructureError


def build(define):
    """Instantiate a Scenario whose define() is ``define``."""
    return type("Defined", (Scenario,), {"define": define})()


class TestDiscovery:
    def test_scenario_without_declarations_has_no_tests(self):
        assert len(Scenario().catalog) == 0
        assert not build(lambda self: None).catalog

    def test_names_tests_by_their_full_path(self):
        def define(self):
            @self.subject("stack")
            def _():
                @self.when("non-empty")
                def _():
                    @self.should("return the head value on pop")
                    def _():
                        pass

                @self.should("start empty")
                def _():
                    pass

        scenario = build(define)
        assert scenario.catalog.names == [
            "stack when non-empty should return the head value on pop",
            "stack should start empty",
        ]
        test = scenario.catalog.get("stack should start empty")
        assert test.path == PathKey.of(["stack", "should start empty"])
        assert test.subject == "stack"

    def test_runs_subject_and_action_bodies_once_but_not_test_bodies(self):
        calls = []

        def define(self):
            @self.subject("subject")
            def _():
                calls.append("subject")

                @self.when("acting")
                def _():
                    calls.append("action")

                    @self.should("assert")
                    def _():
                        calls.append("test")

        build(define)
        assert calls == ["subject", "action"]

    def test_direct_calls_and_decorators_return_the_body(self):
        returned = {}

        def define(self):
            def body():
                returned["direct"] = self.should("be direct", lambda: None)

                @self.should("be decorated")
                def decorated():
                    pass

                returned["decorated"] = decorated

            returned["subject"] = self.subject("subject", body)

        scenario = build(define)
        assert callable(returned["direct"])
        assert returned["decorated"].__name__ == "decorated"
        assert returned["subject"].__name__ == "body"
        assert len(scenario.catalog) == 2

    def test_action_and_test_prefixes(self):
        def define(self):
            @self.subject("light")
            def _():
                @self.when("switched on")
                def _():
                    @self.and_("dimmed")
                    def _():
                        self.should("glow", lambda: None)

                self.action("after sunset", lambda: self.test("is visible", lambda: None))

        assert build(define).catalog.names == [
            "light when switched on and dimmed should glow",
            "light after sunset is visible",
        ]

    def test_subclasses_can_add_their_own_prefixes(self):
        class WithScenario(Scenario):
            def with_(self, description, body=None):
                return self.action(f"with {description}", body)

            def define(self):
                @self.subject("cart")
                def _():
                    @self.with_("two items")
                    def _():
                        self.should("have a total", lambda: None)

        assert WithScenario().catalog.names == ["cart with two items should have a total"]

    def test_subjects_with_same_name_are_both_discovered(self):
        def define(self):
            self.subject("test", lambda: self.should("run first test", lambda: None))
            self.subject("test", lambda: self.should("run second test", lambda: None))

        assert build(define).catalog.names == [
            "test should run first test",
            "test should run second test",
        ]

    def test_actions_with_same_name_are_both_discovered(self):
        def define(self):
            @self.subject("test")
            def _():
                self.when("same", lambda: self.should("run first test", lambda: None))
                self.when("same", lambda: self.should("run second test", lambda: None))

        assert len(build(define).catalog) == 2

    def test_action_with_tests_only_in_nested_actions_is_valid(self):
        def define(self):
            @self.subject("s")
            def _():
                @self.when("outer")
                def _():
                    @self.and_("inner")
                    def _():
                        self.should("pass", lambda: None)

        assert build(define).catalog.names == ["s when outer and inner should pass"]

    def test_errors_in_declaration_bodies_propagate_unchanged(self):
        def define(self):
            @self.subject("broken")
            def _():
                raise ValueError("setup bug")

        with pytest.raises(ValueError, match="setup bug"):
            build(define)


class TestStructureErrors:
    def test_tests_with_identical_names(self):
        def define(self):
            @self.subject("test")
            def _():
                self.should("fail", lambda: None)
                self.should("fail", lambda: None)

        with pytest.raises(StructureError, match="test with identical name has been already defined"):
            build(define)

    def test_identical_names_across_same_named_subjects(self):
        def define(self):
            self.subject("test", lambda: self.should("fail", lambda: None))
            self.subject("test", lambda: self.should("fail", lambda: None))

        with pytest.raises(StructureError, match="test with identical name has been already defined"):
            build(define)

    def test_subject_inside_another_subject(self):
        def define(self):
            self.subject("test", lambda: self.subject("failure", lambda: None))

        with pytest.raises(StructureError, match="subject inside another subject"):
            build(define)

    def test_test_without_subject(self):
        with pytest.raises(StructureError, match="test without subject"):
            build(lambda self: self.should("fail", lambda: None))

    def test_action_without_subject(self):
        with pytest.raises(StructureError, match="action without subject"):
            build(lambda self: self.when("failed", lambda: None))

    def test_action_without_tests(self):
        def define(self):
            self.subject("test", lambda: self.when("without any tests", lambda: None))

        with pytest.raises(StructureError, match="action without tests"):
            build(define)

    def test_nested_action_without_tests(self):
        def define(self):
            @self.subject("test")
            def _():
                @self.when("outer")
                def _():
                    self.should("pass", lambda: None)
                    self.and_("empty", lambda: None)

        with pytest.raises(StructureError, match="action without tests: 'and empty'"):
            build(define)

    def test_subject_can_follow_a_subject_that_failed_to_nest(self):
        # The open-subject flag is cleared even when the body raises.
        scenario = Scenario()
        with pytest.raises(StructureError):
            scenario.subject("outer", lambda: scenario.subject("inner", lambda: None))
        scenario.subject("next", lambda: scenario.should("work", lambda: None))
        assert "next should work" in scenario._tests
