"""
CLI display modules.
"""

from cli.display.tables import display_module_info, display_track_notes

__all__ = [
    "display_module_info",
    "display_track_notes",
]
