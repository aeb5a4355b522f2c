"""Utility functions for Grove."""

import logging
from pathlib import Path

from rich.logging import RichHandler


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging for the application."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def safe_path_join(base: Path, relative: str) -> Path | None:
    """Safely join paths, preventing directory traversal.
    
    Args:
        base: Base directory
        relative: Relative path to join
        
    Returns:
        Joined path if safe, None if traversal detected
    """
    base = base.resolve()
    joined = (base / relative).resolve()
    
    try:
        joined.relative_to(base)
        return joined
    except ValueError:
        return None


def atomic_write(path: Path, content: bytes) -> None:
    """Write bytes atomically using temp file and rename."""
    temp_path = path.with_name(path.name + ".tmp")
    
    try:
        temp_path.write_bytes(content)
        temp_path.replace(path)
    except Exception:
        # Clean up temp file on error
        if temp_path.exists():
            temp_path.unlink()
        raise
