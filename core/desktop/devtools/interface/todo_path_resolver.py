from pathlib import Path
import os
from typing import Optional, Union

from config import get_user_file

DEFAULT_FILENAME = "todo.txt"


def default_documents_dir() -> Path:
    """~/Documents when it exists, otherwise the home directory."""
    home = Path.home()
    documents = home / "Documents"
    return documents if documents.is_dir() else home


def resolve_todo_path(explicit: Optional[Union[str, Path]] = None) -> Path:
    """Unified resolver for the backing todo file.

    Priority:
    1. Explicit path (``-f/--file``).
    2. TPLAN_FILE env variable.
    3. ``file`` key of the user config.
    4. <Documents>/todo.txt.
    """
    if explicit:
        return Path(explicit).expanduser().resolve()

    env_file = os.environ.get("TPLAN_FILE")
    if env_file:
        return Path(env_file).expanduser().resolve()

    configured = get_user_file()
    if configured:
        return configured.resolve()

    return (default_documents_dir() / DEFAULT_FILENAME).resolve()


__all__ = ["resolve_todo_path", "default_documents_dir", "DEFAULT_FILENAME"]
