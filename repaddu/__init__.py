"""Repository analysis: symbol graphs, views, tags, token estimates, LSP parsing and option parsing."""

__version__ = "0.1.0"
__all__ = [
    "analysis_graph",
    "analysis_lsp",
    "analysis_tags",
    "analysis_tokens",
    "analysis_view",
    "cli_parse",
    "core_types",
]