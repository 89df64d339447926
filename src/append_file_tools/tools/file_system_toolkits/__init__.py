"""File system toolkits. Each subpackage exposes ``register_tools(mcp)``."""
