"""
Unit tests for park_graph.cli module.
"""

import argparse
import logging
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from park_graph.cli import (
    add_execute_argument,
    add_linking_arguments,
    get_driver_and_database,
    print_dry_run_header,
    print_execute_header,
    setup_logging,
    verify_neo4j_connection,
)


def _reset_root_logging():
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)


def test_add_execute_argument():
    """Test that add_execute_argument adds the --execute flag."""
    parser = argparse.ArgumentParser()
    add_execute_argument(parser)

    args = parser.parse_args(["--execute"])
    assert args.execute is True

    args = parser.parse_args([])
    assert args.execute is False


def test_add_linking_arguments_defaults(monkeypatch):
    """Test that linking arguments leave unset values to the environment."""
    monkeypatch.setenv("PARK_LINK_THRESHOLD", "not-a-number")
    parser = argparse.ArgumentParser()
    add_linking_arguments(parser)

    args = parser.parse_args([])
    assert args.threshold is None
    assert args.max_distance_km is None

    args = parser.parse_args(["--threshold", "0.8", "--max-distance-km", "25"])
    assert args.threshold == 0.8
    assert args.max_distance_km == 25.0


def test_setup_logging_dry_run():
    """Test logging setup in dry-run mode (console only)."""
    _reset_root_logging()

    logger = setup_logging("test_script", execute=False)

    assert logger is not None
    assert isinstance(logger, logging.Logger)


def test_setup_logging_execute_mode():
    """Test logging setup in execute mode (file + console)."""
    _reset_root_logging()

    with tempfile.TemporaryDirectory() as tmpdir:
        log_dir = Path(tmpdir) / "logs"
        logger = setup_logging("test_script", execute=True, log_dir=log_dir)

        assert logger is not None
        assert log_dir.exists()
        assert len(list(log_dir.glob("test_script_*.log"))) == 1

        _reset_root_logging()


def test_get_driver_and_database():
    """Test that driver and database come from configuration."""
    driver = MagicMock()
    with patch("park_graph.cli.get_neo4j_driver", return_value=driver), patch(
        "park_graph.cli.get_neo4j_database", return_value="parks"
    ):
        assert get_driver_and_database() == (driver, "parks")


def test_get_driver_and_database_exits_without_password():
    """Test that a missing password exits with status 1."""
    mock_logger = MagicMock()
    with patch(
        "park_graph.cli.get_neo4j_driver",
        side_effect=ValueError("NEO4J_PASSWORD not set in .env file"),
    ):
        with pytest.raises(SystemExit) as exc_info:
            get_driver_and_database(mock_logger)

    assert exc_info.value.code == 1
    mock_logger.error.assert_called_once()


def test_verify_neo4j_connection():
    """Test connection verification logging."""
    mock_logger = MagicMock()
    with patch("park_graph.cli.verify_connection", return_value=True):
        assert verify_neo4j_connection(MagicMock(), "neo4j", mock_logger) is True
    mock_logger.info.assert_called_once()

    with patch("park_graph.cli.verify_connection", return_value=False):
        assert verify_neo4j_connection(MagicMock(), "neo4j", mock_logger) is False
    mock_logger.error.assert_called_once()


def test_print_dry_run_header():
    """Test dry-run header printing."""
    mock_logger = MagicMock()
    print_dry_run_header("Test Title", logger=mock_logger)

    # Separator, title, separator
    assert mock_logger.info.call_count == 3

    calls = [str(call) for call in mock_logger.info.call_args_list]
    assert any("Dry Run" in call for call in calls)


def test_print_execute_header():
    """Test execute mode header printing."""
    mock_logger = MagicMock()
    print_execute_header("Test Title", logger=mock_logger)

    assert mock_logger.info.call_count == 3


def test_print_headers_default_logger():
    """Test headers with the default logger."""
    print_dry_run_header("Test Title")
    print_execute_header("Test Title")
