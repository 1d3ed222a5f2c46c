"""Grid topology construction and inter-cell distances."""

from .topology import build_topology, HexDistanceProvider

__all__ = ['build_topology', 'HexDistanceProvider']
