"""Event filter rules and their loader.

Event blacklists / whitelists are too complex to stuff into environment
variables, so they are templated from the deployment manifest into a JSON
file which the nozzle loads at startup.
"""

import json
import logging
from pathlib import Path

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    field_validator,
    model_validator,
)

from src.errors import FilterFileError, FilterParseError

logger = logging.getLogger(__name__)


class EventFilterRule(BaseModel):
    """A filtering rule for a firehose event.

    Neither the event type nor the sink is checked here and the regular
    expression is not compiled; that is up to the filtering engine.
    """

    model_config = ConfigDict(frozen=True)

    # Firehose event type, e.g. "LogMessage" or "ValueMetric"
    type: str = ""
    # "monitoring", "logging" or "all"
    sink: str = ""
    regexp: str = ""

    def __str__(self) -> str:
        regexp = json.dumps(self.regexp, ensure_ascii=False)
        return f"{self.sink}.{self.type} matches {regexp}"


class EventFilterJSON(BaseModel):
    """Blacklist and whitelist loaded from the event filter file."""

    model_config = ConfigDict(frozen=True)

    blacklist: tuple[EventFilterRule, ...] = ()
    whitelist: tuple[EventFilterRule, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def null_is_no_rules(cls, data):
        # a JSON null document decodes to a filter without rules
        return {} if data is None else data

    @field_validator("blacklist", "whitelist", mode="before")
    @classmethod
    def null_is_empty(cls, value):
        return () if value is None else value


def parse_event_filter_json(data: bytes) -> EventFilterJSON | None:
    """Parse the contents of an event filter file.

    Args:
        data: Raw file contents.

    Returns:
        The parsed filter, or None when `data` is empty.

    Raises:
        FilterParseError: If `data` is not a JSON object of the filter shape
    """
    if not data:
        # a templated-but-empty file means no filtering
        return None

    try:
        event_filter = EventFilterJSON.model_validate_json(data)
    except ValidationError as e:
        logger.error("Failed to parse event filter JSON: %s", e)
        raise FilterParseError(f"Invalid event filter JSON: {e}") from e

    for rule in event_filter.blacklist:
        logger.debug("Blacklist rule: %s", rule)
    for rule in event_filter.whitelist:
        logger.debug("Whitelist rule: %s", rule)
    return event_filter


def load_event_filter(path: str) -> EventFilterJSON | None:
    """Load the event filter file, if one is configured.

    Args:
        path: Path to the filter file; empty when no filter is configured.

    Returns:
        The parsed filter, or None when no path is set or the file is empty.

    Raises:
        FilterFileError: If the file cannot be read
        FilterParseError: If the file contents are malformed
    """
    if not path:
        return None

    logger.info("Loading event filter from '%s'", path)
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        logger.error("Failed to read event filter file '%s': %s", path, e)
        raise FilterFileError(f"Cannot read event filter file '{path}': {e}") from e

    return parse_event_filter_json(data)
