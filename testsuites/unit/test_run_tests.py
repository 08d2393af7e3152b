import json
import subprocess
import sys

import pytest

import run_tests
from run_tests import FEATURES, TestRunner, UI_TESTS, UNIT_TESTS, build_parser


def test_unit_suite_runs_pytest_only():
    commands = TestRunner(suite="unit", allure_report=False).build_commands()

    assert commands == [[sys.executable, "-m", "pytest", UNIT_TESTS, "-q"]]


BDD_FEATURE = """\
Feature: Throwaway

  @P0
  Scenario: A step that passes
    Given nothing happens
"""

BDD_STEPS = """\
from behave import given


@given("nothing happens")
def step_nothing(context):
    pass
"""


def test_bdd_command_writes_allure_results(tmp_path):
    features = tmp_path / "features"
    (features / "steps").mkdir(parents=True)
    (features / "throwaway.feature").write_text(BDD_FEATURE, encoding="utf-8")
    (features / "steps" / "steps.py").write_text(BDD_STEPS, encoding="utf-8")
    runner = TestRunner(suite="bdd", tags=["P0"], features=[str(features)])
    runner.allure_results = tmp_path / "allure-results"
    runner.allure_results.mkdir()

    [cmd] = runner.build_commands()
    result = subprocess.run(cmd, cwd=str(tmp_path), capture_output=True, text=True)

    assert result.returncode == 0, result.stderr
    assert list(runner.allure_results.glob("*-result.json"))


def test_bdd_command_passes_tags_and_browser():
    [cmd] = TestRunner(suite="bdd", tags=["P0", "@smoke"], browser="firefox", headless=False).build_commands()

    assert cmd[:4] == [sys.executable, "-m", "behave", FEATURES]
    assert "--tags=@P0,@smoke" in cmd
    assert cmd.index("--outfile") == cmd.index("allure_behave.formatter:AllureFormatter") + 1
    assert "browser=firefox" in cmd
    assert "headless=false" in cmd


def test_all_suite_runs_both_engines():
    runner = TestRunner(suite="all", tags=["P1"], parallel=4)

    pytest_cmd, behave_cmd = runner.build_commands()

    assert pytest_cmd[3:5] == [UNIT_TESTS, UI_TESTS]
    assert pytest_cmd[5:7] == ["-m", "P1"]
    assert pytest_cmd[pytest_cmd.index("-n") + 1] == "4"
    assert "--alluredir" in pytest_cmd
    assert behave_cmd[2] == "behave"


def test_feature_selection_replaces_default_path():
    runner = TestRunner(suite="bdd", features=["testsuites/ui_testing/features/dropdown.feature"])

    [cmd] = runner.build_commands()

    assert cmd[3] == "testsuites/ui_testing/features/dropdown.feature"
    assert FEATURES not in cmd


def test_child_env_carries_browser_settings():
    env = TestRunner(suite="ui", browser="webkit", headless=False)._build_env()

    assert env["UI__BROWSER"] == "webkit"
    assert env["UI__HEADLESS"] == "false"
    assert env["UI_LIVE"] == "1"


def test_unknown_suite_is_rejected():
    with pytest.raises(ValueError):
        TestRunner(suite="api")


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.suite == "all"
    assert args.browser == "chromium"
    assert not args.no_headless


def test_run_returns_first_failing_exit_code(monkeypatch, tmp_path):
    calls = []

    def fake_run(cmd, cwd=None, env=None):
        calls.append(cmd)
        return run_tests.subprocess.CompletedProcess(cmd, 1 if len(calls) == 1 else 0)

    monkeypatch.setattr(run_tests.subprocess, "run", fake_run)
    runner = TestRunner(suite="all", allure_report=False)
    runner.reports_dir = tmp_path / "reports"
    runner.allure_results = runner.reports_dir / "allure-results"

    assert runner.run() == 1
    assert len(calls) == 2


def test_summary_ignores_results_of_earlier_runs(monkeypatch, tmp_path):
    runner = TestRunner(suite="unit")
    runner.reports_dir = tmp_path / "reports"
    runner.allure_results = runner.reports_dir / "allure-results"
    runner.allure_report_dir = runner.reports_dir / "allure-report"
    (runner.allure_results / "history").mkdir(parents=True)
    (runner.allure_results / "history" / "history.json").write_text("{}", encoding="utf-8")
    stale = {"name": "Stale failure", "status": "failed", "start": 0, "stop": 1}
    (runner.allure_results / "stale-result.json").write_text(json.dumps(stale), encoding="utf-8")

    def fake_run(cmd, **kwargs):
        if "pytest" in cmd:
            current = {"name": "Fresh pass", "status": "passed", "start": 0, "stop": 1}
            (runner.allure_results / "fresh-result.json").write_text(json.dumps(current), encoding="utf-8")
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(run_tests.subprocess, "run", fake_run)

    assert runner.run() == 0
    assert runner.summary.total == 1
    assert runner.summary.failed_names == []
    assert (runner.allure_results / "history" / "history.json").exists()
