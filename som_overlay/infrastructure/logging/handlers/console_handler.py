"""Console handler with colored output for interactive use."""

import logging
import os
import sys
from typing import Optional

from ..formatters import HumanFormatter


class ConsoleHandler(logging.StreamHandler):
    """Console handler with automatic color detection and human formatting."""

    def __init__(self,
                 stream=None,
                 use_colors: Optional[bool] = None,
                 show_context: bool = True):
        """Initialize console handler.

        Args:
            stream: Output stream (defaults to stderr)
            use_colors: Force color on/off (auto-detect if None)
            show_context: Whether to show context information
        """
        if stream is None:
            stream = sys.stderr

        super().__init__(stream)

        if use_colors is None:
            use_colors = self._supports_color(stream)

        self.setFormatter(HumanFormatter(use_colors=use_colors,
                                         show_context=show_context))
        self.setLevel(logging.INFO)

    def _supports_color(self, stream) -> bool:
        if not hasattr(stream, 'isatty') or not stream.isatty():
            return False

        # NO_COLOR standard
        if os.environ.get('NO_COLOR'):
            return False

        return os.environ.get('TERM', '') != 'dumb'
