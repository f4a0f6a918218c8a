"""Shared pytest fixtures and configuration."""

import pytest
from unittest.mock import Mock

from src.metadata import MetadataError, MetadataProvider


@pytest.fixture
def base_environ():
    """Minimal environment a nozzle can start with."""
    return {
        "FIREHOSE_ENDPOINT": "https://api.sys.example.com",
        "FIREHOSE_SUBSCRIPTION_ID": "stackdriver-nozzle",
        "FIREHOSE_EVENTS_TO_STACKDRIVER_LOGGING": "LogMessage,Error",
        "GCP_PROJECT_ID": "test-project",
    }


@pytest.fixture
def mock_metadata_provider():
    """Metadata provider for a host that is not on GCE."""
    provider = Mock(spec=MetadataProvider)
    provider.get_project_id.return_value = "metadata-project"
    provider.on_gce.return_value = False
    provider.get_instance_id.return_value = "1234567890"
    provider.get_zone.return_value = "us-central1-a"
    provider.get_instance_name.return_value = "nozzle-vm"
    return provider


@pytest.fixture
def gce_metadata_provider(mock_metadata_provider):
    """Metadata provider for a host on GCE."""
    mock_metadata_provider.on_gce.return_value = True
    return mock_metadata_provider


@pytest.fixture
def failing_metadata_provider(mock_metadata_provider):
    """Metadata provider on GCE whose every lookup fails."""
    error = MetadataError("metadata server unavailable")
    mock_metadata_provider.on_gce.return_value = True
    mock_metadata_provider.get_project_id.side_effect = error
    mock_metadata_provider.get_instance_id.side_effect = error
    mock_metadata_provider.get_zone.side_effect = error
    mock_metadata_provider.get_instance_name.side_effect = error
    return mock_metadata_provider


@pytest.fixture
def filter_file(tmp_path):
    """Write an event filter file and return its path."""

    def _write(content: str) -> str:
        path = tmp_path / "event_filters.json"
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
