class MetadataError(Exception):
    """Exception raised when a metadata lookup fails."""


class MetadataProvider:
    """Base class for cloud metadata providers."""

    def get_project_id(self) -> str:
        """Get the id of the project the host runs in.

        Returns:
            str: Project identifier

        Raises:
            MetadataError: If the project id cannot be retrieved
        """
        raise NotImplementedError

    def on_gce(self) -> bool:
        """Check whether the process runs on a Compute Engine instance."""
        raise NotImplementedError

    def get_instance_id(self) -> str:
        """Get the numeric id of the current instance.

        Raises:
            MetadataError: If the instance id cannot be retrieved
        """
        raise NotImplementedError

    def get_zone(self) -> str:
        """Get the zone of the current instance, e.g. "us-central1-b".

        Raises:
            MetadataError: If the zone cannot be retrieved
        """
        raise NotImplementedError

    def get_instance_name(self) -> str:
        """Get the name of the current instance.

        Raises:
            MetadataError: If the instance name cannot be retrieved
        """
        raise NotImplementedError
