"""
Commands module for BirdSync CLI
"""

from .delete_command import delete_command
from .download_command import download_command
from .list_command import list_command
from .sync_command import sync_command
from .test_command import test_command

__all__ = [
    "delete_command",
    "download_command",
    "list_command",
    "sync_command",
    "test_command",
]
