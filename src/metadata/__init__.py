"""Cloud metadata providers for resolving nozzle identity."""

from .types import MetadataProvider, MetadataError

from .gce import GCEMetadataProvider

__all__ = [
    "GCEMetadataProvider",
    "MetadataProvider",
    "MetadataError",
]
