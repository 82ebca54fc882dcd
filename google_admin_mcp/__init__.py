"""Google Admin MCP: Workspace directory user tools over stdio."""

__version__ = "1.0.0"
