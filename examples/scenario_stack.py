from sceneplay import Scenario, assert_raises


class StackScenario(Scenario):
    def define(self):
        @self.subject("stack")
        def _():
            stack = []

            @self.should("start empty")
            def _():
                assert stack == []

            @self.when("non-empty")
            def _():
                stack.append("head")

                @self.should("return the head value on pop")
                def _():
                    assert stack.pop() == "head"

                @self.and_("popped")
                def _():
                    stack.pop()

                    @self.should("be empty again")
                    def _():
                        assert not stack

            @self.when("empty")
            def _():
                @self.should("complain on pop")
                def _():
                    assert isinstance(assert_raises(stack.pop), IndexError)
