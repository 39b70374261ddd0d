"""Tests for the scenario and step parser."""

import dataclasses

from e2e_dsl import E2EDslParser, parse
from e2e_dsl.config import DslConfig
from e2e_dsl.dsl.parser import parse_tags
from e2e_dsl.scenario import (
    Assert,
    Click,
    Duration,
    GoBack,
    Priority,
    TextContains,
    TextPresent,
    Type,
    UrlContains,
    Wait,
)


class TestScenarioHeader:
    def test_missing_scenario_name(self) -> None:
        result = parse('step "click it" { click #1 }')
        assert result.success is False
        assert result.scenario is None
        assert [e.message for e in result.errors] == ["Scenario name is required"]
        assert (result.errors[0].line, result.errors[0].column) == (1, 0)

    def test_empty_input(self) -> None:
        result = parse("")
        assert result.success is False
        assert result.error_count == 1

    def test_metadata(self, login_dsl) -> None:
        scenario = parse(login_dsl).scenario
        assert scenario.name == "User Login"
        assert scenario.description == "Log in with valid credentials"
        assert scenario.start_url == "https://example.com/login"
        assert scenario.tags == {"auth", "smoke"}
        assert scenario.priority is Priority.CRITICAL

    def test_defaults(self) -> None:
        scenario = parse('scenario "S" { }').scenario
        assert scenario.description == ""
        assert scenario.start_url == ""
        assert scenario.tags == set()
        assert scenario.priority is Priority.MEDIUM
        assert scenario.steps == []

    def test_id_format(self) -> None:
        scenario = parse('scenario "S" { }').scenario
        prefix, millis, suffix = scenario.id.split("_")
        assert prefix == "scenario"
        assert millis.isdigit()
        assert len(suffix) == 8

    def test_additional_scenario_is_ignored(self) -> None:
        result = parse('scenario "First" { }\nscenario "Second" { }')
        assert result.scenario.name == "First"
        assert result.warnings == ["Line 2: Ignoring additional scenario 'Second'"]

    def test_unknown_priority_warns(self) -> None:
        result = parse('scenario "S" {\n    priority urgent\n}')
        assert result.success is True
        assert result.scenario.priority is Priority.MEDIUM
        assert result.warnings == ["Line 2: Unknown priority 'urgent', defaulting to medium"]

    def test_priority_is_case_insensitive(self) -> None:
        assert parse('scenario "S" { priority LOW }').scenario.priority is Priority.LOW

    def test_keywords_before_header_are_still_read(self) -> None:
        scenario = parse('url "https://a.test"\nscenario "S" { }').scenario
        assert scenario.start_url == "https://a.test"


class TestSteps:
    def test_minimal_step(self) -> None:
        result = parse('scenario "S" { step "click it" { click #1 } }')
        assert result.success is True
        assert len(result.scenario.steps) == 1
        step = result.scenario.steps[0]
        assert step.id == "step_0"
        assert step.description == "click it"
        assert step.action == Click(1)

    def test_login_steps(self, login_dsl) -> None:
        result = parse(login_dsl)
        assert result.success is True
        assert result.warnings == []

        steps = result.scenario.steps
        assert [s.id for s in steps] == ["step_0", "step_1", "step_2", "step_3"]
        assert steps[0].action == Type(1, "alice", True, False)
        assert steps[0].expected_outcome == "Username is filled"
        assert steps[1].action == Type(2, "secret", False, True)
        assert steps[1].timeout_ms == 3000
        assert steps[1].retry_count == 2
        assert steps[2].action == Wait(UrlContains("/dashboard"), 8000)
        assert steps[2].timeout_ms is None
        assert steps[3].action == Assert(5, TextContains("Welcome"))
        assert steps[3].continue_on_failure is True

    def test_step_modifiers(self) -> None:
        dsl = """
        scenario "S" {
            step "type" {
                type #2 "hi" clearFirst pressEnter
                timeout 5000
                retry 2
            }
        }
        """
        step = parse(dsl).scenario.steps[0]
        assert step.action == Type(2, "hi", True, True)
        assert step.timeout_ms == 5000
        assert step.retry_count == 2
        assert step.continue_on_failure is False

    def test_wait_timeout_same_line(self) -> None:
        dsl = 'scenario "S" {\n step "w" {\n  wait textPresent "Done" timeout 3000\n }\n}'
        step = parse(dsl).scenario.steps[0]
        assert step.action == Wait(TextPresent("Done"), 3000)
        assert step.timeout_ms is None

    def test_wait_timeout_own_line_is_step_timeout(self) -> None:
        dsl = 'scenario "S" {\n step "w" {\n  wait 1500\n  timeout 9000\n }\n}'
        step = parse(dsl).scenario.steps[0]
        assert step.action == Wait(Duration(1500), 5000)
        assert step.timeout_ms == 9000

    def test_step_without_action_is_dropped(self) -> None:
        dsl = 'scenario "S" {\n  step "only expect" {\n    expect "x"\n  }\n}'
        result = parse(dsl)
        assert result.success is False
        assert result.scenario is not None
        assert result.scenario.steps == []
        assert len(result.errors) == 1
        error = result.errors[0]
        assert "only expect" in error.message
        assert (error.line, error.column) == (2, 2)

    def test_dropped_step_still_consumes_an_index(self) -> None:
        dsl = """
        scenario "S" {
            step "a" { click #1 }
            step "b" { expect "nothing" }
            step "c" { click #3 }
        }
        """
        steps = parse(dsl).scenario.steps
        assert [s.id for s in steps] == ["step_0", "step_2"]

    def test_second_action_is_discarded(self) -> None:
        dsl = 'scenario "S" {\n  step "two" {\n    click #1\n    hover #2\n  }\n}'
        result = parse(dsl)
        assert result.success is True
        assert result.scenario.steps[0].action == Click(1)
        assert result.warnings == ["Line 4: Step 'two' already has an action; ignoring 'hover'"]

    def test_invalid_action_leaves_step_without_action(self) -> None:
        dsl = 'scenario "S" {\n  step "bad" {\n    click\n  }\n}'
        result = parse(dsl)
        assert result.success is False
        assert result.warnings == ["Line 3: 'click' action is missing required arguments"]
        assert result.errors[0].message == "Step 'bad' has no action"

    def test_negative_retry_is_clamped(self) -> None:
        dsl = 'scenario "S" {\n  step "r" {\n    refresh\n    retry -1\n  }\n}'
        result = parse(dsl)
        assert result.scenario.steps[0].retry_count == 0
        assert len(result.warnings) == 1
        assert "negative retry" in result.warnings[0]

    def test_missing_closing_brace(self) -> None:
        result = parse('scenario "S" {\n  step "open" {\n    goBack\n')
        assert result.success is True
        assert result.scenario.steps[0].action == GoBack()
        assert result.warnings == ["Line 2: Step 'open' is missing its closing brace"]

    def test_step_without_body_does_not_swallow_next_step(self) -> None:
        dsl = 'scenario "S" {\n  step "nobody"\n  step "real" { refresh }\n}'
        result = parse(dsl)
        assert [s.description for s in result.scenario.steps] == ["real"]
        assert result.scenario.steps[0].id == "step_1"
        assert result.errors[0].message == "Step 'nobody' has no action"

    def test_closing_brace_before_body_ends_step(self) -> None:
        dsl = 'scenario "S" {\n  step "x"\n}\nstep "y" { refresh }'
        result = parse(dsl)
        assert result.warnings == []
        assert [e.message for e in result.errors] == ["Step 'x' has no action"]
        assert [(s.id, s.description) for s in result.scenario.steps] == [("step_1", "y")]

    def test_step_without_description(self) -> None:
        step = parse('scenario "S" { step { goForward } }').scenario.steps[0]
        assert step.description == ""


class TestCatastrophicFailure:
    def test_non_string_input(self) -> None:
        result = parse(None)
        assert result.success is False
        assert result.scenario is None
        assert len(result.errors) == 1
        assert (result.errors[0].line, result.errors[0].column) == (0, 0)


class TestDeterminism:
    def test_parsing_twice_gives_equal_scenarios(self, login_dsl) -> None:
        first = parse(login_dsl).scenario
        second = parse(login_dsl).scenario
        assert first.id != second.id
        assert dataclasses.replace(first, id="") == dataclasses.replace(second, id="")

    def test_parser_instance_is_reusable(self, login_dsl) -> None:
        parser = E2EDslParser()
        assert parser.parse("").success is False
        result = parser.parse(login_dsl)
        assert result.success is True
        assert result.errors == []

    def test_config_defaults_flow_into_actions(self) -> None:
        parser = E2EDslParser(DslConfig(default_screenshot_name="page"))
        step = parser.parse('scenario "S" { step { screenshot } }').scenario.steps[0]
        assert step.action.name == "page"


class TestParseTags:
    def test_quoted(self) -> None:
        assert parse_tags('["a", "b"]') == {"a", "b"}

    def test_bare_and_empty_entries(self) -> None:
        assert parse_tags("[a, , b ]") == {"a", "b"}

    def test_empty(self) -> None:
        assert parse_tags("[]") == set()

    def test_unterminated(self) -> None:
        assert parse_tags('["a"') == {"a"}

    def test_duplicates_collapse(self) -> None:
        assert parse_tags('["x", "x"]') == {"x"}
