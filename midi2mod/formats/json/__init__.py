"""Module JSON serialization."""

from midi2mod.formats.json.layout import JsonLayout
from midi2mod.formats.json.reader import ModuleJsonReader
from midi2mod.formats.json.writer import ModuleJsonWriter

__all__ = ["JsonLayout", "ModuleJsonReader", "ModuleJsonWriter"]
