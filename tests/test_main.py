"""Tests for src.main module."""

import json
import logging
from unittest.mock import patch

import pytest

from src.errors import MetadataResolutionError, SettingsValidationError
from src.main import configure_logging, main, parse_args
from src.settings import NozzleSettings


@pytest.fixture
def settings():
    return NozzleSettings(
        api_endpoint="https://api.example.com",
        subscription_id="test-subscription",
        logging_events="LogMessage",
        password="top-secret",
        project_id="test-project",
    )


class TestParseArgs:
    """Test cases for argument parsing."""

    def test_parse_args_defaults(self):
        with patch("sys.argv", ["main.py"]):
            args = parse_args()

            assert args.log_level == "INFO"
            assert args.rich_logs is False
            assert args.print_config is False

    def test_parse_args_all_options(self):
        test_args = ["--log-level", "DEBUG", "--rich-logs", "--print-config"]

        with patch("sys.argv", ["main.py"] + test_args):
            args = parse_args()

            assert args.log_level == "DEBUG"
            assert args.rich_logs is True
            assert args.print_config is True

    def test_parse_args_invalid_log_level(self):
        with patch("sys.argv", ["main.py", "--log-level", "TRACE"]):
            with pytest.raises(SystemExit):
                parse_args()


class TestConfigureLogging:
    """Test cases for logging configuration."""

    @patch("src.main.logging.basicConfig")
    def test_standard_logging(self, mock_basic_config):
        configure_logging("WARNING")

        mock_basic_config.assert_called_once()
        assert mock_basic_config.call_args[1]["level"] == logging.WARNING
        assert "handlers" not in mock_basic_config.call_args[1]
        assert logging.getLogger("urllib3").level == logging.WARNING

    @patch("src.main.logging.basicConfig")
    def test_rich_logging(self, mock_basic_config):
        configure_logging("DEBUG", use_rich=True)

        mock_basic_config.assert_called_once()
        call_kwargs = mock_basic_config.call_args[1]
        assert call_kwargs["level"] == logging.DEBUG
        assert type(call_kwargs["handlers"][0]).__name__ == "RichHandler"


class TestMain:
    """Test cases for the main function."""

    @patch("src.main.configure_logging")
    @patch("src.main.load_config")
    def test_main_success(self, mock_load_config, mock_configure_logging, settings):
        mock_load_config.return_value = settings

        with patch("sys.argv", ["main.py"]):
            result = main()

        assert result == 0
        mock_configure_logging.assert_called_once_with("INFO", False)
        mock_load_config.assert_called_once()

    @patch("src.main.configure_logging")
    @patch("src.main.load_config")
    def test_main_print_config(
        self, mock_load_config, mock_configure_logging, settings, capsys
    ):
        """Test that --print-config prints the redacted summary."""
        mock_load_config.return_value = settings

        with patch("sys.argv", ["main.py", "--print-config"]):
            result = main()

        assert result == 0
        out = capsys.readouterr().out
        printed = json.loads(out)
        assert printed["subscription_id"] == "test-subscription"
        assert printed["password"] == "<redacted>"
        assert "top-secret" not in out

    @patch("src.main.configure_logging")
    @patch("src.main.load_config")
    def test_main_summary_logged_without_password(
        self, mock_load_config, mock_configure_logging, settings, caplog
    ):
        mock_load_config.return_value = settings

        with patch("sys.argv", ["main.py"]), caplog.at_level(logging.INFO):
            main()

        assert "Nozzle configuration" in caplog.text
        assert "top-secret" not in caplog.text

    @pytest.mark.parametrize(
        "error,stage",
        [
            (SettingsValidationError("FIREHOSE_ENDPOINT is empty"), "validation"),
            (MetadataResolutionError("Failed to resolve project id"), "identity"),
        ],
    )
    @patch("src.main.configure_logging")
    @patch("src.main.load_config")
    def test_main_config_error(
        self, mock_load_config, mock_configure_logging, error, stage, caplog
    ):
        """Test that configuration errors exit with 1 and name the stage."""
        mock_load_config.side_effect = error

        with patch("sys.argv", ["main.py"]):
            result = main()

        assert result == 1
        assert f"Invalid nozzle configuration ({stage})" in caplog.text
        assert str(error) in caplog.text

    @patch("src.main.configure_logging")
    @patch("src.main.load_config")
    def test_main_unexpected_error(
        self, mock_load_config, mock_configure_logging, caplog
    ):
        mock_load_config.side_effect = RuntimeError("boom")

        with patch("sys.argv", ["main.py"]):
            result = main()

        assert result == 1
        assert "Error loading nozzle configuration: boom" in caplog.text

    @patch("src.main.configure_logging")
    @patch("src.main.load_config")
    def test_main_interrupted(self, mock_load_config, mock_configure_logging, caplog):
        """Test that an interrupt during loading is not reported as success."""
        mock_load_config.side_effect = KeyboardInterrupt

        with patch("sys.argv", ["main.py"]):
            result = main()

        assert result == 1
        assert "Interrupted" in caplog.text

    @patch("src.main.configure_logging")
    @patch("src.main.load_config")
    def test_main_debug_nozzle(
        self, mock_load_config, mock_configure_logging, settings
    ):
        """Test that DEBUG_NOZZLE raises the root log level."""
        mock_load_config.return_value = settings.model_copy(
            update={"debug_nozzle": True}
        )
        root_logger = logging.getLogger()
        previous_level = root_logger.level

        try:
            with patch("sys.argv", ["main.py"]):
                main()

            assert root_logger.level == logging.DEBUG
        finally:
            root_logger.setLevel(previous_level)
