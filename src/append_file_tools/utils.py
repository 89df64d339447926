"""Environment helpers for the server entry point."""
import os


def get_env_var(name: str, default: str | None = None, required: bool = False) -> str | None:
    """
    Read an environment variable.

    Args:
        name: Variable name
        default: Value returned when the variable is unset or empty
        required: Raise instead of falling back to ``default``

    Raises:
        ValueError: If ``required`` is set and the variable is missing
    """
    value = os.getenv(name)
    if value:
        return value
    if required:
        raise ValueError(f"Required environment variable {name} is not set")
    return default
