"""Scripting plugin execution phases."""

from __future__ import annotations

from enum import IntEnum


class PluginExecutionGroup(IntEnum):
    """Phase of server start-up in which a plugin runs (stored as one byte)."""

    PACK_LOAD = 0
    SERVER_START = 1
    UNKNOWN_3 = 2
    UNKNOWN_4 = 3