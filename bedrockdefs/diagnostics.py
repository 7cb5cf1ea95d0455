"""Log areas and severity levels used by the server's diagnostics output."""

from __future__ import annotations

from enum import IntEnum


class LogAreaId(IntEnum):
    """Subsystem that a log message belongs to."""

    ALL = 0
    PLATFORM = 1
    ENTITY = 2
    DATABASE = 3
    GUI = 4
    SYSTEM = 5
    NETWORK = 6
    RENDER = 7
    MEMORY = 8
    ANIMATION = 9
    INPUT = 10
    LEVEL = 11
    SERVER = 12
    DLC = 13
    PHYSICS = 14
    FILE = 15
    STORAGE = 16
    REALMS = 17
    REALMSAPI = 18
    XBOXLIVE = 19
    USERMANAGER = 20
    XSAPI = 21
    PERF = 22
    TELEMTRY = 23
    BLOCKS = 24
    RAKNET = 25
    GAMEFACE = 26
    SOUND = 27
    INTERACTIVE = 28
    SCRIPTING = 29
    PLAYFAB = 30
    AUTOMATION = 31
    PERSONA = 32
    TEXTURE = 33
    ASSETPACKAGES = 34
    ITEMS = 35
    SERVICES = 36
    VOLUMES = 37
    LOOTTABLE = 38
    SIDEBAR = 39
    LOCALIZATION = 40
    MOVEMENT = 41
    LIVEEVENTS = 42
    EDITOR = 43
    LEVELTRANSITION = 44
    UNKNOWN = 45
    STORE = 46
    WORLD = 47
    MESSAGING = 48
    NETHERNET = 49
    SERIALIZATION = 50
    INVALID = 10000


class LogLevel(IntEnum):
    """Severity of a log message; each level is a distinct bit."""

    VERBOSE = 1
    INFO = 2
    WARNING = 4
    ERROR = 8