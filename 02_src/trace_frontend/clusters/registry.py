"""Cluster registry implementation."""

from typing import Iterable, Protocol


class IClusterRegistry(Protocol):
    """Source of known cluster names."""

    def list_clusters(self) -> list[str]:
        """Return a read-only snapshot of the known cluster names."""
        ...


class StaticClusterRegistry:
    """Registry over a fixed, configured list of clusters."""

    def __init__(self, clusters: Iterable[str]):
        self._clusters = tuple(clusters)

    def list_clusters(self) -> list[str]:
        return list(self._clusters)


def has_cluster(registry: IClusterRegistry, cluster: str) -> bool:
    """Case-insensitive membership check."""
    wanted = cluster.casefold()
    return any(known.casefold() == wanted for known in registry.list_clusters())
