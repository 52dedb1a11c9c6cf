"""
Layout tree building and layout engine invocation.
"""

from .invoker import GeometryNode, LayoutEngine, LayoutInvoker, available_size
from .layout_tree import LayoutNode, LayoutTree, LayoutTreeBuilder, extract_style

__all__ = [
    'GeometryNode', 'LayoutEngine', 'LayoutInvoker', 'available_size',
    'LayoutNode', 'LayoutTree', 'LayoutTreeBuilder', 'extract_style',
]
