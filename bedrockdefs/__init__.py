"""Block-game server enumerations, a connection record, and Vec2/Vec3 vector math."""

__version__ = "0.1.0"

__all__ = ["actor", "commands", "diagnostics", "network", "sample", "scripting", "vec2", "vec3"]