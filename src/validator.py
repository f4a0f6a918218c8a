"""Cross-field checks on loaded nozzle settings."""

from src.errors import SettingsValidationError
from src.settings import NozzleSettings


def validate_settings(settings: NozzleSettings) -> None:
    """Check settings invariants, stopping at the first violation.

    Raises:
        SettingsValidationError: If a check fails
    """
    if not settings.subscription_id:
        raise SettingsValidationError("FIREHOSE_SUBSCRIPTION_ID is empty")

    if not settings.api_endpoint:
        raise SettingsValidationError("FIREHOSE_ENDPOINT is empty")

    if not settings.logging_events and not settings.monitoring_events:
        raise SettingsValidationError(
            "FIREHOSE_EVENTS_TO_STACKDRIVER_LOGGING and "
            "FIREHOSE_EVENTS_TO_STACKDRIVER_MONITORING are empty"
        )
