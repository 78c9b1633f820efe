"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from docbrowser.container import container
from docbrowser.use_cases.files.file_store import FileStore


def get_file_store() -> FileStore:
    """
    Get the session file store from the container.

    Returns:
        FileStore: The shared file store instance
    """
    return container.get_file_store()
