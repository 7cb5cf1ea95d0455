"""Network listener configuration."""

from __future__ import annotations

from dataclasses import dataclass

_UINT16_MAX = 0xFFFF
_UINT32_MAX = 0xFFFFFFFF


def _check_range(name: str, value: int, upper: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be between 0 and {upper}, got {value}")


@dataclass(frozen=True)
class ConnectionDefinition:
    """Ports and connection limits for the server's listeners.

    Ports are unsigned 16-bit values and connection counts unsigned 32-bit
    values; anything outside those ranges is rejected.
    """

    port_ipv4: int = 0
    port_ipv6: int = 0
    min_connections: int = 0
    max_connections: int = 0

    def __post_init__(self) -> None:
        _check_range("port_ipv4", self.port_ipv4, _UINT16_MAX)
        _check_range("port_ipv6", self.port_ipv6, _UINT16_MAX)
        _check_range("min_connections", self.min_connections, _UINT32_MAX)
        _check_range("max_connections", self.max_connections, _UINT32_MAX)