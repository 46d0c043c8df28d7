"""Cluster registry module."""

from .registry import IClusterRegistry, StaticClusterRegistry, has_cluster

__all__ = ["IClusterRegistry", "StaticClusterRegistry", "has_cluster"]
