"""Provider for the Compute Engine metadata server."""

import logging
from collections.abc import Mapping
from typing_extensions import override

import requests

from src import constants

from src.metadata.types import MetadataProvider, MetadataError


logger = logging.getLogger(__name__)


class GCEMetadataProvider(MetadataProvider):
    """Metadata provider backed by the Compute Engine metadata server."""

    metadata_host: str
    host_from_env: bool

    def __init__(self, metadata_host: str | None = None):
        """
        Args:
            metadata_host: Host (and optional port) of the metadata server. When
            given, the process is assumed to run on Compute Engine without
            probing.
        """
        self.metadata_host = metadata_host or constants.METADATA_IP
        self.host_from_env = bool(metadata_host)
        self._on_gce: bool | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "GCEMetadataProvider":
        """Create a provider honouring GCE_METADATA_HOST from `environ`."""
        return cls(metadata_host=environ.get(constants.METADATA_HOST_ENV))

    def get(self, suffix: str) -> str:
        """Get a value from the metadata server.

        Args:
            suffix: Path below computeMetadata/v1, e.g. "instance/id".

        Returns:
            The value with surrounding whitespace stripped.

        Raises:
            MetadataError: If the server cannot be reached, the value is not
                defined or the server answers with an error
        """
        url = f"http://{self.metadata_host}/{constants.METADATA_PATH}/{suffix}"
        logger.debug("Querying metadata server: %s", url)
        try:
            response = requests.get(
                url,
                headers={constants.METADATA_FLAVOR_HEADER: constants.METADATA_FLAVOR},
                timeout=(constants.METADATA_CONNECT_TIMEOUT, None),
            )
        except requests.RequestException as e:
            raise MetadataError(f"Failed to query metadata {suffix!r}: {e}") from e

        if response.status_code == requests.codes.not_found:
            raise MetadataError(f"Metadata {suffix!r} not defined")
        if response.status_code != requests.codes.ok:
            raise MetadataError(
                f"Got {response.status_code} response for metadata {suffix!r}: "
                f"{response.text}"
            )
        return response.text.strip()

    @override
    def get_project_id(self) -> str:
        return self.get("project/project-id")

    @override
    def on_gce(self) -> bool:
        """Check whether the metadata server is reachable.

        The answer is computed once per provider. An explicitly configured
        metadata host is trusted without probing.
        """
        if self._on_gce is None:
            self._on_gce = self.host_from_env or self._probe()
        return self._on_gce

    def _probe(self) -> bool:
        try:
            response = requests.get(
                f"http://{self.metadata_host}",
                headers={constants.METADATA_FLAVOR_HEADER: constants.METADATA_FLAVOR},
                timeout=constants.METADATA_PROBE_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.debug("Metadata server not reachable, not on GCE: %s", e)
            return False
        return (
            response.headers.get(constants.METADATA_FLAVOR_HEADER)
            == constants.METADATA_FLAVOR
        )

    @override
    def get_instance_id(self) -> str:
        return self.get("instance/id")

    @override
    def get_zone(self) -> str:
        # returned as projects/<number>/zones/<zone>
        return self.get("instance/zone").rsplit("/", 1)[-1]

    @override
    def get_instance_name(self) -> str:
        return self.get("instance/name")
