"""Resolve the project and instance identity of the nozzle."""

import logging
from collections.abc import Callable

from src.errors import MetadataResolutionError
from src.metadata import MetadataProvider, MetadataError
from src.settings import NozzleSettings

logger = logging.getLogger(__name__)


def ensure_project_id(
    settings: NozzleSettings, provider: MetadataProvider
) -> NozzleSettings:
    """Fill in the project id from the metadata server when it is not set.

    The project id addresses both sinks, so failing to resolve it is fatal.

    Raises:
        MetadataResolutionError: If the metadata lookup fails
    """
    if settings.project_id:
        return settings

    logger.info("GCP_PROJECT_ID not set, resolving project id from metadata")
    try:
        project_id = provider.get_project_id()
    except MetadataError as e:
        logger.error("Failed to resolve project id: %s", e)
        raise MetadataResolutionError(f"Failed to resolve project id: {e}") from e

    return settings.model_copy(update={"project_id": project_id})


def keep_previous_on_failure(
    lookup: Callable[[], str], previous: str, label: str
) -> str:
    """Return the result of `lookup`, or `previous` if the lookup fails."""
    try:
        return lookup()
    except MetadataError as e:
        logger.debug("Keeping %s %r, metadata lookup failed: %s", label, previous, e)
        return previous


def set_nozzle_host_info(
    settings: NozzleSettings, provider: MetadataProvider
) -> NozzleSettings:
    """Label the nozzle with the instance id, name and zone when on GCE.

    Each lookup is independent and a failed one keeps the configured value.
    """
    if not provider.on_gce():
        return settings

    return settings.model_copy(
        update={
            "nozzle_id": keep_previous_on_failure(
                provider.get_instance_id, settings.nozzle_id, "nozzle id"
            ),
            "nozzle_zone": keep_previous_on_failure(
                provider.get_zone, settings.nozzle_zone, "nozzle zone"
            ),
            "nozzle_name": keep_previous_on_failure(
                provider.get_instance_name, settings.nozzle_name, "nozzle name"
            ),
        }
    )
