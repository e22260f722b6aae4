"""MCP tool handlers, grouped by area."""
