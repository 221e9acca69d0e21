import importlib

import pytest
from typer.testing import CliRunner

cli_app_module = importlib.import_module("cysim.cli.app")


@pytest.fixture(autouse=True)
def _no_delay(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CYSIM_RUN_DELAY_SECONDS", "0")


def test_run_success() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["run", 'cy.log("Yay!")'])
    assert result.exit_code == 0
    assert "Success:" in result.output
    assert 'cy.log("Yay!") // Logged message "Yay!"' in result.output


def test_run_invalid_command_exits_non_zero() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["run", "cy.run()"])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "Invalid Cypress command: cy.run()" in result.output


def test_run_warning() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["run", 'cy.contains("Login")'])
    assert result.exit_code == 0
    assert "Warning:" in result.output
    assert "The `cy.contains` command has not been implemented yet." in result.output


def test_run_rejects_negative_delay() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["run", "cy.reload()", "--delay", "-1"])
    assert result.exit_code == 1
    assert "Invalid cysim settings" in result.output


def test_run_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CYSIM_LOG_LEVEL", "verbose")
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["run", 'cy.log("Yay!")'])
    assert result.exit_code == 1
    assert not isinstance(result.exception, ValueError)
    assert "Invalid cysim settings" in result.output


def test_help_command() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["help"])
    assert result.exit_code == 0
    assert "Common Cypress commands and examples:" in result.output
    assert "official Cypress API documentation" in result.output


def test_commands_lists_table() -> None:
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, ["commands"])
    assert result.exit_code == 0
    assert "cy.contains" in result.output


def test_shell_is_default(monkeypatch: pytest.MonkeyPatch) -> None:
    called: dict[str, object] = {}

    def _fake_run_shell(session, renderer) -> None:
        called["skip_captcha"] = session.auth.login()

    monkeypatch.setenv("CYSIM_SKIP_CAPTCHA", "true")
    monkeypatch.setattr(cli_app_module, "run_shell", _fake_run_shell)
    runner = CliRunner()
    result = runner.invoke(cli_app_module.app, [])
    assert result.exit_code == 0
    assert called == {"skip_captcha": True}
