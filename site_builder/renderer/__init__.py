from .context import BlockContext, RenderMode
from .html import page_path, publish_site, render_document, render_page, render_page_html
from .nodes import Node, Raw, find_binding, find_bindings, find_effects, find_nodes, fragment, h, style, to_html
from .registry import (
    error_node,
    fallback_node,
    get_renderer,
    register,
    registered_types,
    render_block,
    render_blocks,
    unregister,
)

__all__ = [
    "BlockContext",
    "RenderMode",
    "Node",
    "Raw",
    "h",
    "fragment",
    "style",
    "to_html",
    "find_nodes",
    "find_effects",
    "find_bindings",
    "find_binding",
    "register",
    "unregister",
    "get_renderer",
    "registered_types",
    "render_block",
    "render_blocks",
    "fallback_node",
    "error_node",
    "render_page",
    "render_page_html",
    "render_document",
    "publish_site",
    "page_path",
]
