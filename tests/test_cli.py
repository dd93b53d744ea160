import logging

import pytest
from typer.testing import CliRunner

from modechoice._version import __version__
from modechoice.cli import app

runner = CliRunner()

CONFIG = """
modes: [car, pt, walk]
trip_constraints:
  - kind: vehicle_trip
    require_start_at_home: [car]
    require_continuity: [car]
    require_end_at_home: [car]
"""

PLAN = """
person: alice
activities:
  - {type: home, location: H}
  - {type: work, location: W}
  - {type: shop, location: S}
  - {type: home, location: H}
modes: [car, walk, walk]
"""


@pytest.fixture
def files(tmp_path):
    config_file = tmp_path.joinpath("config.yaml")
    config_file.write_text(CONFIG)
    plan_file = tmp_path.joinpath("plan.yaml")
    plan_file.write_text(PLAN)
    return config_file, plan_file


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("modechoice")
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)


def test_info():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "modechoice" in result.stdout
    assert __version__ in result.stdout


def test_check(files):
    config_file, _ = files
    result = runner.invoke(app, ["check", "-c", str(config_file)])
    assert result.exit_code == 0, result.stdout
    assert "modechoice.Config:" in result.stdout
    assert "vehicle_trip" in result.stdout


def test_check_invalid(tmp_path):
    config_file = tmp_path.joinpath("bad.yaml")
    config_file.write_text("selector:\n  kind: softmax\n")
    result = runner.invoke(app, ["check", "-c", str(config_file)])
    assert result.exit_code == 1
    assert "invalid configuration" in result.stdout


def test_feasibility(files):
    config_file, plan_file = files
    result = runner.invoke(
        app, ["feasibility", "-c", str(config_file), "-p", str(plan_file)]
    )
    assert result.exit_code == 0, result.stdout
    assert "Feasible modes for alice" in result.stdout
    assert "home@H" in result.stdout
    assert "car, pt, walk" in result.stdout


def test_feasibility_invalid_plan(files, tmp_path):
    config_file, _ = files
    plan_file = tmp_path.joinpath("short.yaml")
    plan_file.write_text("activities:\n  - {type: home, location: H}\nmodes: [car]\n")
    result = runner.invoke(
        app, ["feasibility", "-c", str(config_file), "-p", str(plan_file)]
    )
    assert result.exit_code == 1
    assert "invalid plan" in result.stdout


def test_feasibility_log_file(files, tmp_path, restore_logger):
    config_file, plan_file = files
    log_file = tmp_path.joinpath("feasibility.log")
    result = runner.invoke(
        app,
        [
            "feasibility",
            "-c",
            str(config_file),
            "-p",
            str(plan_file),
            "--log",
            str(log_file),
        ],
    )
    assert result.exit_code == 0, result.stdout
    for h in restore_logger.handlers:
        h.flush()
    assert "mode choice model with 1 trip constraints" in log_file.read_text()
