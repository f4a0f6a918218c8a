"""Build the nozzle configuration at startup.

Loads settings from the environment, validates them, resolves the project
id, loads the optional event filter and labels the nozzle with its host
identity. Any failure except host labelling aborts startup with a
`ConfigError`.
"""

import logging
import os
from collections.abc import Mapping

from src.env_loader import load_settings
from src.event_filter import load_event_filter
from src.identity import ensure_project_id, set_nozzle_host_info
from src.metadata import GCEMetadataProvider, MetadataProvider
from src.settings import NozzleSettings
from src.validator import validate_settings

logger = logging.getLogger(__name__)


def load_config(
    environ: Mapping[str, str] | None = None,
    metadata_provider: MetadataProvider | None = None,
) -> NozzleSettings:
    """Build the nozzle settings.

    Args:
        environ: Environment variable lookup, defaults to `os.environ`.
        metadata_provider: Cloud metadata provider, defaults to the Compute
            Engine metadata server.

    Returns:
        Validated settings with the project id set.

    Raises:
        ConfigError: If any stage fails; `stage` names the failing one
    """
    if environ is None:
        environ = os.environ
    if metadata_provider is None:
        metadata_provider = GCEMetadataProvider.from_environ(environ)

    settings = load_settings(environ)
    logger.debug("Loaded settings from environment")

    validate_settings(settings)
    logger.debug("Settings validated")

    settings = ensure_project_id(settings, metadata_provider)
    logger.debug("Using project id '%s'", settings.project_id)

    event_filter = load_event_filter(settings.event_filter_file)
    if event_filter is not None:
        settings = settings.model_copy(update={"event_filter": event_filter})
        logger.info(
            "Loaded event filter with %d blacklist and %d whitelist rules",
            len(event_filter.blacklist),
            len(event_filter.whitelist),
        )

    settings = set_nozzle_host_info(settings, metadata_provider)
    logger.info(
        "Nozzle configuration complete (id: %s, name: %s, zone: %s)",
        settings.nozzle_id,
        settings.nozzle_name,
        settings.nozzle_zone,
    )
    return settings
