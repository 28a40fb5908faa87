"""Shared source-extension table for scanner, extractor and resolver."""

from __future__ import annotations

# Extensions that take part in the graph, in resolution order
SOURCE_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")

# tree-sitter grammar used for every file: tsx accepts both JSX and
# type annotations, so one grammar covers .js/.jsx/.ts/.tsx
GRAMMAR_NAME = "tsx"

# App-router file names that the router loads directly
APP_ROUTER_ENTRY_NAMES: dict[str, tuple[str, ...]] = {
    "page": (".js", ".jsx", ".ts", ".tsx"),
    "layout": (".js", ".jsx", ".ts", ".tsx"),
    "route": (".js", ".ts"),
}


def is_source_file(name: str) -> bool:
    """Case-insensitive check against SOURCE_EXTENSIONS."""
    lower = name.lower()
    return any(lower.endswith(ext) for ext in SOURCE_EXTENSIONS)
