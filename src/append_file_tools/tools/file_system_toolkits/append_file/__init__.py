from .append_file import register_tools

__all__ = ["register_tools"]
