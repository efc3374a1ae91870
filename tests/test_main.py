"""
Tests for the linecli process entry point

Tests cover:
- Argument parsing
- Running a session over stdin/stdout
- Exit codes for configuration, I/O and interrupt failures
"""
import io
from unittest.mock import patch

import pytest

from linecli.cli.main import build_manager, main, setup_argument_parser
from linecli.cli.manager import PROMPT
from linecli.utils.config_manager import ConfigManager


class TestArgumentParser:
    """Tests for setup_argument_parser"""

    def test_defaults(self):
        """Test no options leaves everything to the configuration"""
        args = setup_argument_parser().parse_args([])
        assert args.config is None
        assert args.log_level is None
        assert args.prompt is None

    def test_log_level_upper_cased(self):
        """Test log levels are accepted in any case"""
        args = setup_argument_parser().parse_args(["--log-level", "debug"])
        assert args.log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown levels are rejected by argparse"""
        with pytest.raises(SystemExit):
            setup_argument_parser().parse_args(["--log-level", "loud"])


class TestBuildManager:
    """Tests for build_manager"""

    def test_registers_service_handler(self, config_path):
        """Test the default handlers are registered"""
        manager = build_manager(ConfigManager(config_path))
        assert manager.get_available_commands() == ["calculate", "is-running", "start", "stop"]

    def test_prompt_from_config(self, config_path):
        """Test the configured prompt is used"""
        config = ConfigManager(config_path)
        config.set_config("shell.prompt", "$ ", persist=False)
        assert build_manager(config).prompt == "$ "

    def test_prompt_override(self, config_path):
        """Test an explicit prompt wins over the configuration"""
        assert build_manager(ConfigManager(config_path), "# ").prompt == "# "


class TestMain:
    """Tests for main"""

    def test_session_over_standard_streams(self, config_path):
        """Test main runs the loop on stdin/stdout and returns 0 on exit"""
        stdin = io.StringIO("start\ncalculate sum 2 + 3\nexit\n")
        stdout = io.StringIO()

        with patch("sys.stdin", stdin), patch("sys.stdout", stdout):
            code = main(["--config", str(config_path)])

        assert code == 0
        assert stdout.getvalue() == f"{PROMPT}started\n{PROMPT}sum is 5\n{PROMPT}"

    def test_end_of_input_returns_zero(self, config_path):
        """Test closing stdin ends the session cleanly"""
        with patch("sys.stdin", io.StringIO("")), patch("sys.stdout", io.StringIO()):
            assert main(["--config", str(config_path)]) == 0

    def test_invalid_config(self, config_path):
        """Test a broken configuration file exits with 1"""
        config_path.write_text("{broken")
        assert main(["--config", str(config_path)]) == 1

    def test_invalid_configured_log_level(self, config_path):
        """Test an unknown configured log level exits with 1"""
        config_path.write_text('{"logging": {"log_level": "LOUD"}}')
        assert main(["--config", str(config_path)]) == 1

    def test_io_failure(self, config_path):
        """Test a transport failure exits with 1"""
        with patch("linecli.cli.main.CliManager.start", side_effect=OSError("Broken pipe")):
            assert main(["--config", str(config_path)]) == 1

    def test_keyboard_interrupt(self, config_path):
        """Test Ctrl-C exits with 130"""
        with patch("linecli.cli.main.CliManager.start", side_effect=KeyboardInterrupt):
            assert main(["--config", str(config_path)]) == 130
