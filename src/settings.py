from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
)

from src import constants
from src.event_filter import EventFilterJSON


class NozzleSettings(BaseModel):
    """Nozzle settings loaded from the environment.

    Settings are immutable per runtime. Each field with an alias is read from
    the environment variable of that name; fields without a default are
    required to be present.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Firehose settings
    api_endpoint: str = Field(alias="FIREHOSE_ENDPOINT")
    logging_events: str = Field(
        "", alias="FIREHOSE_EVENTS_TO_STACKDRIVER_LOGGING"
    )
    monitoring_events: str = Field(
        "", alias="FIREHOSE_EVENTS_TO_STACKDRIVER_MONITORING"
    )
    username: str = Field(
        constants.DEFAULT_FIREHOSE_USERNAME, alias="FIREHOSE_USERNAME"
    )
    password: SecretStr = Field(
        SecretStr(constants.DEFAULT_FIREHOSE_PASSWORD), alias="FIREHOSE_PASSWORD"
    )
    skip_ssl: bool = Field(False, alias="FIREHOSE_SKIP_SSL")
    subscription_id: str = Field(alias="FIREHOSE_SUBSCRIPTION_ID")
    newline_token: str = Field("", alias="FIREHOSE_NEWLINE_TOKEN")

    # Stackdriver settings
    project_id: str = Field("", alias="GCP_PROJECT_ID")
    logging_batch_count: int = Field(
        constants.DEFAULT_LOGGING_BATCH_COUNT, alias="LOGGING_BATCH_COUNT"
    )
    logging_batch_duration: int = Field(
        constants.DEFAULT_LOGGING_BATCH_DURATION, alias="LOGGING_BATCH_DURATION"
    )
    logging_reqs_in_flight: int = Field(
        constants.DEFAULT_LOGGING_REQUESTS_IN_FLIGHT,
        alias="LOGGING_REQUESTS_IN_FLIGHT",
    )

    # Nozzle settings
    heartbeat_rate: int = Field(
        constants.DEFAULT_HEARTBEAT_RATE, alias="HEARTBEAT_RATE"
    )
    metrics_buffer_duration: int = Field(
        constants.DEFAULT_METRICS_BUFFER_DURATION, alias="METRICS_BUFFER_DURATION"
    )
    metrics_batch_size: int = Field(
        constants.DEFAULT_METRICS_BATCH_SIZE, alias="METRICS_BATCH_SIZE"
    )
    metric_path_prefix: str = Field(
        constants.DEFAULT_METRIC_PATH_PREFIX, alias="METRIC_PATH_PREFIX"
    )
    foundation_name: str = Field(
        constants.DEFAULT_FOUNDATION_NAME, alias="FOUNDATION_NAME"
    )
    resolve_app_metadata: bool = Field(False, alias="RESOLVE_APP_METADATA")
    nozzle_id: str = Field(constants.DEFAULT_NOZZLE_IDENTITY, alias="NOZZLE_ID")
    nozzle_name: str = Field(constants.DEFAULT_NOZZLE_IDENTITY, alias="NOZZLE_NAME")
    nozzle_zone: str = Field(constants.DEFAULT_NOZZLE_IDENTITY, alias="NOZZLE_ZONE")
    debug_nozzle: bool = Field(False, alias="DEBUG_NOZZLE")
    runtime_metric_regex: str = Field(
        constants.DEFAULT_RUNTIME_METRIC_REGEX, alias="RUNTIME_METRIC_REGEX"
    )
    # Report CounterEvents as cumulative metrics instead of a delta and a
    # total gauge. Requires every CounterEvent of a metric to be routed to the
    # same nozzle process.
    enable_cumulative_counters: bool = Field(
        False, alias="ENABLE_CUMULATIVE_COUNTERS"
    )
    # Derive per-application HTTP counters from HttpStartStop events
    enable_app_http_metrics: bool = Field(False, alias="ENABLE_APP_HTTP_METRICS")
    # Expire counter state not seen for this many seconds
    counter_tracker_ttl: int = Field(
        constants.DEFAULT_COUNTER_TRACKER_TTL, alias="COUNTER_TRACKER_TTL"
    )

    event_filter_file: str = Field("", alias="EVENT_FILTER_FILE")
    # None means no filter file was loaded: permit all events to all sinks
    event_filter: EventFilterJSON | None = None

    def to_log_data(self) -> dict[str, Any]:
        """Return a logging-safe summary of the settings.

        Only a curated set of fields is included and the password is always
        replaced by a redaction marker.
        """
        return {
            "api_endpoint": self.api_endpoint,
            "username": self.username,
            "password": constants.REDACTED,
            "monitoring_events": self.monitoring_events,
            "logging_events": self.logging_events,
            "skip_ssl": self.skip_ssl,
            "project_id": self.project_id,
            "logging_batch_count": self.logging_batch_count,
            "logging_batch_duration": self.logging_batch_duration,
            "heartbeat_rate": self.heartbeat_rate,
            "resolve_app_metadata": self.resolve_app_metadata,
            "subscription_id": self.subscription_id,
            "debug_nozzle": self.debug_nozzle,
            "newline_token": self.newline_token,
        }
