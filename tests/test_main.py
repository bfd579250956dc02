"""Tests for the sitecheck command-line interface."""

import json

import pytest
from unittest.mock import MagicMock, PropertyMock, patch
from selenium.common.exceptions import WebDriverException

from sitecheck import main as cli
from sitecheck.browser_automation.browser_session import BACKENDS
from sitecheck.config.check_config import CheckSettings, TargetConfig
from sitecheck.error_handling.errors import DriverProvisioningError


@pytest.fixture
def fake_driver():
    driver = MagicMock()
    driver.session_id = "cli-session"
    driver.title = "GitHub · Build and ship software"
    with patch.dict(BACKENDS, {"chrome": MagicMock(return_value=driver)}), \
            patch.object(cli.DriverInstaller, "install", return_value="/cache/chromedriver"):
        yield driver


def test_matching_title_exits_zero(fake_driver, capsys):
    exit_code = cli.run_title_check(CheckSettings())

    assert exit_code == cli.EXIT_OK
    assert "[PASS]" in capsys.readouterr().out
    fake_driver.get.assert_called_once_with("https://www.github.com")
    fake_driver.quit.assert_called_once_with()


def test_mismatched_title_exits_one_and_quits_browser(fake_driver, capsys):
    settings = CheckSettings(target_config=TargetConfig(expected_title_substring="NotGitHubAtAll"))

    exit_code = cli.run_title_check(settings)

    assert exit_code == cli.EXIT_MISMATCH
    assert "[FAIL]" in capsys.readouterr().out
    fake_driver.quit.assert_called_once_with()


def test_json_output(fake_driver, capsys):
    cli.run_title_check(CheckSettings(), as_json=True)

    data = json.loads(capsys.readouterr().out)
    assert data['passed'] is True
    assert data['browser'] == "chrome"
    assert data['expected_substring'] == "GitHub"


def test_provisioning_failure_exits_two(capsys):
    with patch.object(
        cli.DriverInstaller, "install", side_effect=DriverProvisioningError("chrome", "offline")
    ):
        exit_code = cli.run_title_check(CheckSettings())

    assert exit_code == cli.EXIT_ENVIRONMENT
    err = capsys.readouterr().err
    assert "offline" in err
    assert "SITECHECK_DRIVER_PATH" in err


def test_cli_overrides_environment(clean_env):
    clean_env.setenv("SITECHECK_URL", "https://from-env.test")
    args = cli.create_argument_parser().parse_args([
        "--url", "https://www.python.org",
        "--expect", "Python",
        "--browser", "firefox",
        "--headless",
        "--page-load-timeout", "20",
        "--no-driver-manager",
    ])

    settings = cli.apply_overrides(cli.get_check_settings(), args)

    assert settings.target_config.url == "https://www.python.org"
    assert settings.target_config.expected_title_substring == "Python"
    assert settings.browser_config.browser == "firefox"
    assert settings.browser_config.headless is True
    assert settings.browser_config.page_load_timeout_seconds == 20.0
    assert settings.driver_config.use_driver_manager is False


def test_main_passes_arguments_through(clean_env):
    with patch.object(cli, "load_dotenv"), \
            patch.object(cli, "run_title_check", return_value=0) as run:
        exit_code = cli.main(["--expect", "Hub", "--json"])

    assert exit_code == 0
    settings = run.call_args.args[0]
    assert settings.target_config.expected_title_substring == "Hub"
    assert run.call_args.kwargs == {"as_json": True, "verbose": False}


def test_invalid_timeout_configuration_exits_two(clean_env, capsys):
    with patch.object(cli, "load_dotenv"):
        exit_code = cli.main(["--page-load-timeout", "-1"])

    assert exit_code == cli.EXIT_ENVIRONMENT
    assert "timeout" in capsys.readouterr().err.lower()


def test_quit_failure_keeps_check_result(fake_driver, capsys):
    """A browser that fails to quit after the title was read does not discard the result."""
    fake_driver.quit.side_effect = WebDriverException("browser already gone")

    exit_code = cli.run_title_check(CheckSettings())

    assert exit_code == cli.EXIT_OK
    captured = capsys.readouterr()
    assert "[PASS]" in captured.out
    assert "browser already gone" in captured.err
    fake_driver.quit.assert_called_once_with()


def test_quit_failure_through_main_returns_exit_code(fake_driver, clean_env):
    fake_driver.quit.side_effect = WebDriverException("browser already gone")

    with patch.object(cli, "load_dotenv"):
        exit_code = cli.main([])

    assert exit_code == cli.EXIT_OK


def test_crashed_browser_exits_two(capsys):
    driver = MagicMock(session_id="crashed")
    type(driver).title = PropertyMock(side_effect=WebDriverException("chrome not reachable"))
    with patch.dict(BACKENDS, {"chrome": MagicMock(return_value=driver)}), \
            patch.object(cli.DriverInstaller, "install", return_value="/cache/chromedriver"):
        exit_code = cli.run_title_check(CheckSettings())

    assert exit_code == cli.EXIT_ENVIRONMENT
    assert "chrome not reachable" in capsys.readouterr().err
    driver.quit.assert_called_once_with()


def test_empty_expected_title_from_env_exits_two_before_launch(clean_env, capsys):
    clean_env.setenv("SITECHECK_EXPECTED_TITLE", "")

    with patch.object(cli, "load_dotenv"), \
            patch.object(cli.DriverInstaller, "install") as install:
        exit_code = cli.main([])

    assert exit_code == cli.EXIT_ENVIRONMENT
    assert "Expected title" in capsys.readouterr().err
    assert not install.called


def test_empty_expect_flag_is_not_ignored(clean_env, capsys):
    with patch.object(cli, "load_dotenv"), \
            patch.object(cli, "run_title_check") as run:
        exit_code = cli.main(["--expect", ""])

    assert exit_code == cli.EXIT_ENVIRONMENT
    assert not run.called


def test_apply_overrides_leaves_original_settings_untouched(clean_env):
    original = cli.get_check_settings()
    args = cli.create_argument_parser().parse_args([
        "--url", "https://www.python.org",
        "--expect", "Python",
        "--browser", "firefox",
        "--page-load-timeout", "20",
        "--no-driver-manager",
    ])

    overridden = cli.apply_overrides(original, args)

    assert overridden.target_config.url == "https://www.python.org"
    assert original.target_config.url == "https://www.github.com"
    assert original.target_config.expected_title_substring == "GitHub"
    assert original.browser_config.browser == "chrome"
    assert original.browser_config.page_load_timeout_seconds is None
    assert original.driver_config.use_driver_manager is True
    assert overridden.browser_config is not original.browser_config
