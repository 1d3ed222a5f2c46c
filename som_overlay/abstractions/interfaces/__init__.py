"""Interfaces for the collaborators the overlay relies on."""

from .grid_services import IGridDistanceProvider, IBestMatchAssigner

__all__ = ['IGridDistanceProvider', 'IBestMatchAssigner']
