"""Enumerations describing server commands, their origins and grammar."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class CommandBlockMode(IntEnum):
    """How a command block triggers."""

    NORMAL = 0
    REPEATING = 1
    CHAIN = 2


class CommandOriginType(IntEnum):
    """Where a command was issued from."""

    PLAYER = 0
    COMMANDBLOCK = 1
    MINECARTCOMMANDBLOCK = 2
    DEVCONSOLE = 3
    TEST = 4
    AUTOMATIONPLAYER = 5
    CLIENTAUTOMATION = 6
    DEDICATEDSERVER = 7
    ENTITY = 8
    VIRTUAL = 9
    GAMEARGUMENT = 10
    ENTITYSERVER = 11
    PRECOMPILED = 12
    GAMEDIRECTORENTITYSERVER = 13
    SCRIPTING = 14
    EXECUTECONTEXT = 15


class CommandOutputType(IntEnum):
    """How much output a command reports back."""

    NONE = 0
    LASTOUTPUT = 1
    SILENT = 2
    ALLOUTPUT = 3
    DATASET = 4


class CommandParameterOption(IntFlag):
    """Option bits attached to a command parameter."""

    NONE = 0
    ENUMAUTOCOMPLETEEXPANSION = 0x01
    HASSEMANTICCONSTRAINT = 0x02
    ENUMASCHAINEDCOMMAND = 0x04


class CommandPermissionLevel(IntEnum):
    """Permission needed to run a command, from least to most privileged."""

    ANY = 0
    GAMEDIRECTORS = 1
    ADMIN = 2
    HOST = 3
    OWNER = 4
    INTERNAL = 5


class HardNonTerminal(IntEnum):
    """Built-in non-terminal symbols of the command grammar."""

    EPSILON = 0x100000
    INT = 0x100001
    FLOAT = 0x100002
    VAL = 0x100003
    RVAL = 0x100004
    WILDCARDINT = 0x100005
    OPERATOR = 0x100006
    COMPAREOPERATOR = 0x100007
    SELECTION = 0x100008
    STANDALONESELECTION = 0x100009
    WILDCARDSELECTION = 0x10000A
    NONIDSELECTOR = 0x10000B
    SCORESARG = 0x10000C
    SCORESARGS = 0x10000D
    SCORESELECTPARAM = 0x10000E
    SCORESELECTOR = 0x10000F
    TAGSELECTOR = 0x100010
    FILEPATH = 0x100011
    FILEPATHVAL = 0x100012
    FILEPATHCONT = 0x100013
    INTEGERRANGEVAL = 0x100014
    INTEGERRANGEPOSTVAL = 0x100015
    INTEGERRANGE = 0x100016
    FULLINTEGERRANGE = 0x100017
    RATIONALRANGEVAL = 0x100018
    RATIONALRANGEPOSTVAL = 0x100019
    RATIONALRANGE = 0x10001A
    FULLRATIONALRANGE = 0x10001B
    SELARGS = 0x10001C
    ARGS = 0x10001D
    ARG = 0x10001E
    MARG = 0x10001F
    MVALUE = 0x100020
    NAMEARG = 0x100021
    TYPEARG = 0x100022
    FAMILYARG = 0x100023
    HASPERMISSIONARG = 0x100024
    HASPERMISSIONARGS = 0x100025
    HASPERMISSIONSELECTOR = 0x100026
    HASPERMISSIONELEMENT = 0x100027
    HASPERMISSIONELEMENTS = 0x100028
    TAGARG = 0x100029
    HASITEMELEMENT = 0x10002A
    HASITEMELEMENTS = 0x10002B
    HASITEMARG = 0x10002C
    HASITEMARGS = 0x10002D
    HASITEMSELECTOR = 0x10002E
    EQUIPMENTSLOTENUM = 0x10002F
    PROPERTYVALUE = 0x100030
    HASPROPERTYPARAMVALUE = 0x100031
    HASPROPERTYPARAMENUMVALUE = 0x100032
    HASPROPERTYARG = 0x100033
    HASPROPERTYARGS = 0x100034
    HASPROPERTYELEMENT = 0x100035
    HASPROPERTYELEMENTS = 0x100036
    HASPROPERTYSELECTOR = 0x100037
    ID = 0x100038
    IDCONT = 0x100039
    COORDXINT = 0x10003A
    COORDYINT = 0x10003B
    COORDZINT = 0x10003C
    COORDXFLOAT = 0x10003D
    COORDYFLOAT = 0x10003E
    COORDZFLOAT = 0x10003F
    POSITION = 0x100040
    POSITIONFLOAT = 0x100041
    MESSAGEEXP = 0x100042
    MESSAGE = 0x100043
    MESSAGEROOT = 0x100044
    POSTSELECTOR = 0x100045
    RAWTEXT = 0x100046
    RAWTEXTCONT = 0x100047
    JSONVALUE = 0x100048
    JSONFIELD = 0x100049
    JSONOBJECT = 0x10004A
    JSONOBJECTFIELDS = 0x10004B
    JSONOBJECTCONT = 0x10004C
    JSONARRAY = 0x10004D
    JSONARRAYVALUES = 0x10004E
    JSONARRAYCONT = 0x10004F
    BLOCKSTATE = 0x100050
    BLOCKSTATEKEY = 0x100051
    BLOCKSTATEVALUE = 0x100052
    BLOCKSTATEVALUES = 0x100053
    BLOCKSTATEARRAY = 0x100054
    BLOCKSTATEARRAYCONT = 0x100055
    COMMAND = 0x100056
    SLASHCOMMAND = 0x100057
    CODEBUILDERARG = 0x100058
    CODEBUILDERARGS = 0x100059
    CODEBUILDERSELECTPARAM = 0x10005A
    CODEBUILDERSELECTOR = 0x10005B