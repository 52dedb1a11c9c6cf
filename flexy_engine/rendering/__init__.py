"""
Widget materialization for solved layouts.
"""

from .renderer import ResultRenderer

__all__ = ['ResultRenderer']
