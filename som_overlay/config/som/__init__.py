"""SOM Overlay Configuration Module

Use get_overlay_config() to access the singleton configuration instance.
"""

from .overlay_config import OverlayConfig, OverlayConfigError, get_overlay_config

__all__ = ['OverlayConfig', 'OverlayConfigError', 'get_overlay_config']
