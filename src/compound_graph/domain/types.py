"""Shared type aliases and sentinels used across the library.

The sentinels live below the printable ASCII range so they cannot be
confused with a caller-supplied node id or edge name.
"""
from __future__ import annotations

from typing import TypeAlias

NodeId: TypeAlias = str
EdgeName: TypeAlias = str
EdgeKey: TypeAlias = tuple[str, str, str]   # (source, target, name)

GRAPH_ROOT = "\x00"          # parent of every top-level node in a compound graph
DEFAULT_EDGE_NAME = "\x00"   # name slot of an unnamed edge key
EDGE_KEY_DELIM = "\x01"      # separator in the debug string form of a key
