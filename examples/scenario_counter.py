from collections import Counter

from sceneplay import Scenario


class WordCountScenario(Scenario):
    """Declarations may also pass bodies directly instead of decorating them."""

    def define(self):
        def counter():
            counts = Counter("the quick brown fox jumps over the lazy dog".split())

            self.should("count repeated words", lambda: self._check(counts["the"], 2))
            self.should("count single words", lambda: self._check(counts["fox"], 1))

            def after_update():
                counts.update(["fox", "fox"])
                self.should("add to the existing count", lambda: self._check(counts["fox"], 3))

            self.when("updated", after_update)

        self.subject("word counter", counter)

    @staticmethod
    def _check(actual, expected):
        assert actual == expected, f"expected {expected}, got {actual}"
