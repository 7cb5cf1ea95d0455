"""Enumerations describing actors (entities) and their data, events and flags."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class MessageId(IntEnum):
    """Kind of an actor block-sync message."""

    NONE = 0
    CREATE = 1
    DESTROY = 2


class ActorCategory(IntFlag):
    """Broad categories an actor belongs to; members combine as bit flags."""

    NONE = 0
    PLAYER = 1 << 0
    MONSTER = 1 << 2
    HUMANOID = 1 << 3
    ANIMAL = 1 << 4
    WATER = 1 << 5
    UNKNOWN_1 = 1 << 8
    UNKNOWN_2 = 1 << 9
    ITEM = 1 << 10
    UNKNOWN_3 = 1 << 11
    VILLAGER = 1 << 12
    ARTHROPOD = 1 << 13
    UNDEAD = 1 << 14
    UNKNOWN_4 = 1 << 15
    MINECART = 1 << 16
    UNKNOWN_5 = 1 << 17
    UNKNOWN_6 = 1 << 18
    PREDICTABLE = 1 << 19


class ActorDamageCause(IntEnum):
    """Source of damage dealt to an actor."""

    NONE = -1
    OVERRIDE = 0
    CONTACT = 1
    ENTITYATTACK = 2
    PROJECTILE = 3
    SUFFOCATION = 4
    FALL = 5
    FIRE = 6
    FIRETICK = 7
    LAVA = 8
    DROWNING = 9
    BLOCKEXPLOSION = 10
    ENTITYEXPLOSION = 11
    VOID = 12
    SELFDESTRUCT = 13
    MAGIC = 14
    WITHER = 15
    STARVE = 16
    ANVIL = 17
    THORNS = 18
    FALLINGBLOCK = 19
    PISTON = 20
    FLYINTOWALL = 21
    MAGMA = 22
    FIREWORKS = 23
    LIGHTNING = 24
    CHARGING = 25
    TEMPERATURE = 26
    FREEZING = 27
    STALACTITE = 28
    STALAGMITE = 29
    RAMATTACK = 30
    SONICBOOM = 31
    CAMPFIRE = 32
    SOULCAMPFIRE = 33
    ALL = 34


class ActorDataBoundingBoxComponentType(IntEnum):
    """Which dimension of an actor's bounding box a data item sets."""

    SCALE = 0
    WIDTH = 1
    HEIGHT = 2


class ActorDataIDs(IntEnum):
    """Keys of the synchronised actor data items."""

    RESERVED_0 = 0
    STRUCTURAL_INTEGRITY = 1
    VARIANT = 2
    COLOR_INDEX = 3
    NAME = 4
    OWNER = 5
    TARGET = 6
    AIR_SUPPLY = 7
    EFFECT_COLOR = 8
    RESERVED_009 = 9
    RESERVED_010 = 10
    HURT = 11
    HURT_DIR = 12
    ROW_TIME_LEFT = 13
    ROW_TIME_RIGHT = 14
    VALUE = 15
    DISPLAY_TILE_RUNTIME_ID = 16
    DISPLAY_OFFSET = 17
    CUSTOM_DISPLAY = 18
    SWELL = 19
    OLD_SWELL = 20
    SWELL_DIR = 21
    CHARGE_AMOUNT = 22
    CARRY_BLOCK_RUNTIME_ID = 23
    CLIENT_EVENT = 24
    USING_ITEM = 25
    PLAYER_FLAGS = 26
    PLAYER_INDEX = 27
    BED_POSITION = 28
    X_POWER = 29
    Y_POWER = 30
    Z_POWER = 31
    AUX_POWER = 32
    FISHX = 33
    FISHZ = 34
    FISHANGLE = 35
    AUX_VALUE_DATA = 36
    LEASH_HOLDER = 37
    RESERVED_038 = 38
    HAS_NPC = 39
    NPC_DATA = 40
    ACTIONS = 41
    AIR_SUPPLY_MAX = 42
    MARK_VARIANT = 43
    CONTAINER_TYPE = 44
    CONTAINER_SIZE = 45
    CONTAINER_STRENGTH_MODIFIER = 46
    BLOCK_TARGET = 47
    INV = 48
    TARGET_A = 49
    TARGET_B = 50
    TARGET_C = 51
    AERIAL_ATTACK = 52
    RESERVED_053 = 53
    RESERVED_054 = 54
    FUSE_TIME = 55
    RESERVED_056 = 56
    SEAT_LOCK_PASSENGER_ROTATION = 57
    SEAT_LOCK_PASSENGER_ROTATION_DEGREES = 58
    SEAT_ROTATION_OFFSET = 59
    SEAT_ROTATION_OFFSET_DEGREES = 60
    DATA_RADIUS = 61
    DATA_WAITING = 62
    DATA_PARTICLE = 63
    PEEK_ID = 64
    ATTACH_FACE = 65
    ATTACHED = 66
    ATTACH_POS = 67
    TRADE_TARGET = 68
    CAREER = 69
    HAS_COMMAND_BLOCK = 70
    COMMAND_NAME = 71
    LAST_COMMAND_OUTPUT = 72
    TRACK_COMMAND_OUTPUT = 73
    RESERVED_074 = 74
    STRENGTH = 75
    STRENGTH_MAX = 76
    DATA_SPELL_CASTING_COLOR = 77
    DATA_LIFETIME_TICKS = 78
    POSE_INDEX = 79
    DATA_TICK_OFFSET = 80
    NAMETAG_ALWAYS_SHOW = 81
    COLOR_2_INDEX = 82
    NAME_AUTHOR = 83
    SCORE = 84
    BALLOON_ANCHOR = 85
    PUFFED_STATE = 86
    BUBBLE_TIME = 87
    AGENT = 88
    SITTING_AMOUNT = 89
    SITTING_AMOUNT_PREVIOUS = 90
    EATING_COUNTER = 91
    RESERVED_092 = 92
    LAYING_AMOUNT = 93
    LAYING_AMOUNT_PREVIOUS = 94
    DATA_DURATION = 95
    DATA_SPAWN_TIME_DEPRECATED = 96
    DATA_CHANGE_RATE = 97
    DATA_CHANGE_ON_PICKUP = 98
    DATA_PICKUP_COUNT = 99
    INTERACT_TEXT = 100
    TRADE_TIER = 101
    MAX_TRADE_TIER = 102
    TRADE_EXPERIENCE = 103
    SKIN_ID = 104
    SPAWNING_FRAMES = 105
    COMMAND_BLOCK_TICK_DELAY = 106
    COMMAND_BLOCK_EXECUTE_ON_FIRST_TICK = 107
    AMBIENT_SOUND_INTERVAL = 108
    AMBIENT_SOUND_INTERVAL_RANGE = 109
    AMBIENT_SOUND_EVENT_NAME = 110
    FALL_DAMAGE_MULTIPLIER = 111
    NAME_RAW_TEXT = 112
    CAN_RIDE_TARGET = 113
    LOW_TIER_CURED_TRADE_DISCOUNT = 114
    HIGH_TIER_CURED_TRADE_DISCOUNT = 115
    NEARBY_CURED_TRADE_DISCOUNT = 116
    NEARBY_CURED_DISCOUNT_TIME_STAMP = 117
    HITBOX = 118
    IS_BUOYANT = 119
    FREEZING_EFFECT_STRENGTH = 120
    BUOYANCY_DATA = 121
    GOAT_HORN_COUNT = 122
    BASE_RUNTIME_ID = 123
    MOVEMENT_SOUND_DISTANCE_OFFSET = 124
    HEARTBEAT_INTERVAL_TICKS = 125
    HEARTBEAT_SOUND_EVENT = 126
    PLAYER_LAST_DEATH_POS = 127
    PLAYER_LAST_DEATH_DIMENSION = 128
    PLAYER_HAS_DIED = 129
    COLLISION_BOX = 130
    VISIBLE_MOB_EFFECTS = 131
    FILTERED_NAME = 132
    ENTER_BED_POSITION = 133
    COUNT = 134


class ActorEvent(IntEnum):
    """Events broadcast about an actor."""

    NONE = 0
    JUMP = 1
    HURT = 2
    DEATH = 3
    START_ATTACKING = 4
    STOP_ATTACKING = 5
    TAMING_FAILED = 6
    TAMING_SUCCEEDED = 7
    SHAKE_WETNESS = 8
    EAT_GRASS = 10
    FISHHOOK_BUBBLE = 11
    FISHHOOK_FISHPOS = 12
    FISHHOOK_HOOKTIME = 13
    FISHHOOK_TEASE = 14
    SQUID_FLEEING = 15
    ZOMBIE_CONVERTING = 16
    PLAY_AMBIENT = 17
    SPAWN_ALIVE = 18
    START_OFFER_FLOWER = 19
    STOP_OFFER_FLOWER = 20
    LOVE_HEARTS = 21
    VILLAGER_ANGRY = 22
    VILLAGER_HAPPY = 23
    WITCH_HAT_MAGIC = 24
    FIREWORKS_EXPLODE = 25
    IN_LOVE_HEARTS = 26
    SILVERFISH_MERGE_ANIM = 27
    GUARDIAN_ATTACK_SOUND = 28
    DRINK_POTION = 29
    THROW_POTION = 30
    PRIME_TNTCART = 31
    PRIME_CREEPER = 32
    AIR_SUPPLY = 33
    ADD_PLAYER_LEVELS = 34
    GUARDIAN_MINING_FATIGUE = 35
    AGENT_SWING_ARM = 36
    DRAGON_START_DEATH_ANIM = 37
    GROUND_DUST = 38
    SHAKE = 39
    FEED = 57
    BABY_AGE = 60
    INSTANT_DEATH = 61
    NOTIFY_TRADE = 62
    LEASH_DESTROYED = 63
    CARAVAN_UPDATED = 64
    TALISMAN_ACTIVATE = 65
    DEPRECATED_UPDATE_STRUCTURE_FEATURE = 66
    PLAYER_SPAWNED_MOB = 67
    PUKE = 68
    UPDATE_STACK_SIZE = 69
    START_SWIMMING = 70
    BALLOON_POP = 71
    TREASURE_HUNT = 72
    SUMMON_AGENT = 73
    FINISHED_CHARGING_ITEM = 74
    ACTOR_GROW_UP = 76
    VIBRATION_DETECTED = 77
    DRINK_MILK = 78


class ActorFlags(IntEnum):
    """Bit positions of the actor status flags."""

    ONFIRE = 0
    SNEAKING = 1
    RIDING = 2
    SPRINTING = 3
    USINGITEM = 4
    INVISIBLE = 5
    TEMPTED = 6
    INLOVE = 7
    SADDLED = 8
    POWERED = 9
    IGNITED = 10
    BABY = 11
    CONVERTING = 12
    CRITICAL = 13
    CAN_SHOW_NAME = 14
    ALWAYS_SHOW_NAME = 15
    NOAI = 16
    SILENT = 17
    WALLCLIMBING = 18
    CANCLIMB = 19
    CANSWIM = 20
    CANFLY = 21
    CANWALK = 22
    RESTING = 23
    SITTING = 24
    ANGRY = 25
    INTERESTED = 26
    CHARGED = 27
    TAMED = 28
    ORPHANED = 29
    LEASHED = 30
    SHEARED = 31
    GLIDING = 32
    ELDER = 33
    MOVING = 34
    BREATHING = 35
    CHESTED = 36
    STACKABLE = 37
    SHOW_BOTTOM = 38
    STANDING = 39
    SHAKING = 40
    IDLING = 41
    CASTING = 42
    CHARGING = 43
    WASD_CONTROLLED = 44
    CAN_POWER_JUMP = 45
    CAN_DASH = 46
    LINGERING = 47
    HAS_COLLISION = 48
    HAS_GRAVITY = 49
    FIRE_IMMUNE = 50
    DANCING = 51
    ENCHANTED = 52
    RETURNTRIDENT = 53
    CONTAINER_IS_PRIVATE = 54
    IS_TRANSFORMING = 55
    DAMAGENEARBYMOBS = 56
    SWIMMING = 57
    BRIBED = 58
    IS_PREGNANT = 59
    LAYING_EGG = 60
    PASSENGER_CAN_PICK = 61
    TRANSITION_SITTING = 62
    EATING = 63
    LAYING_DOWN = 64
    SNEEZING = 65
    TRUSTING = 66
    ROLLING = 67
    SCARED = 68
    IN_SCAFFOLDING = 69
    OVER_SCAFFOLDING = 70
    DESCEND_THROUGH_BLOCK = 71
    BLOCKING = 72
    TRANSITION_BLOCKING = 73
    BLOCKED_USING_SHIELD = 74
    BLOCKED_USING_DAMAGED_SHIELD = 75
    SLEEPING = 76
    WANTS_TO_WAKE = 77
    TRADE_INTEREST = 78
    DOOR_BREAKER = 79
    BREAKING_OBSTRUCTION = 80
    DOOR_OPENER = 81
    IS_ILLAGER_CAPTAIN = 82
    STUNNED = 83
    ROARING = 84
    DELAYED_ATTACK = 85
    IS_AVOIDING_MOBS = 86
    IS_AVOIDING_BLOCK = 87
    FACING_TARGET_TO_RANGE_ATTACK = 88
    HIDDEN_WHEN_INVISIBLE = 89
    IS_IN_UI = 90
    STALKING = 91
    EMOTING = 92
    CELEBRATING = 93
    ADMIRING = 94
    CELEBRATING_SPECIAL = 95
    OUT_OF_CONTROL = 96
    RAM_ATTACK = 97
    PLAYING_DEAD = 98
    IN_ASCENDABLE_BLOCK = 99
    OVER_DESCENDABLE_BLOCK = 100
    CROAKING = 101
    EAT_MOB = 102
    JUMP_GOAL_JUMP = 103
    EMERGING = 104
    SNIFFING = 105
    DIGGING = 106
    SONIC_BOOM = 107
    HAS_DASH_COOLDOWN = 108
    PUSH_TOWARDS_CLOSEST_SPACE = 109
    DEPRECATED_1 = 110
    DEPRECATED_2 = 111
    DEPRECATED_3 = 112
    SEARCHING = 113
    CRAWLING = 114
    TIMER_FLAG_1 = 115
    TIMER_FLAG_2 = 116
    TIMER_FLAG_3 = 117
    BODY_ROTATION_BLOCKED = 118
    RENDERS_WHEN_INVISIBLE = 119
    BODY_ROTATION_AXIS_ALIGNED = 120
    COLLIDABLE = 121
    WASD_AIR_CONTROLLED = 122
    COUNT = 123


class ActorLinkType(IntEnum):
    """How two actors are linked together."""

    NONE = 0
    RIDING = 1
    PASSENGER = 2


class ActorType(IntEnum):
    """Actor type identifiers and the family bits used to build them."""

    UNDEFINED = 1
    TYPEMASK = 0x000000FF
    MOB = 0x00000100
    PATHFINDERMOB = 0x00000200
    MONSTER = 0x00000800
    ANIMAL = 0x00001000
    TAMABLEANIMAL = 0x00004000
    AMBIENT = 0x00008000
    UNDEADMOB = 0x00010000
    ZOMBIEMONSTER = 0x00020000
    ARTHROPOD = 0x00040000
    MINECART = 0x00080000
    SKELETONMONSTER = 0x00100000
    EQUINEANIMAL = 0x00200000
    PROJECTILE = 0x00400000
    ABSTRACTARROW = 0x00800000
    WATERANIMAL = 0x00002000
    VILLAGERBASE = 0x01000000
    CHICKEN = 10
    COW = 11
    PIG = 12
    SHEEP = 13
    WOLF = 14
    VILLAGER = 15
    MUSHROOMCOW = 16
    SQUID = 17
    RABBIT = 18
    BAT = 19
    IRONGOLEM = 20
    SNOWGOLEM = 21
    OCELOT = 22
    HORSE = 23
    POLARBEAR = 28
    LLAMA = 29
    PARROT = 30
    DOLPHIN = 31
    DONKEY = 24
    MULE = 25
    SKELETONHORSE = 26
    ZOMBIEHORSE = 27
    ZOMBIE = 32
    CREEPER = 33
    SKELETON = 34
    SPIDER = 35
    PIGZOMBIE = 36
    SLIME = 37
    ENDERMAN = 38
    SILVERFISH = 39
    CAVESPIDER = 40
    GHAST = 41
    LAVASLIME = 42
    BLAZE = 43
    ZOMBIEVILLAGER = 44
    WITCH = 45
    STRAY = 46
    HUSK = 47
    WITHERSKELETON = 48
    GUARDIAN = 49
    ELDERGUARDIAN = 50
    NPC = 51
    WITHERBOSS = 52
    DRAGON = 53
    SHULKER = 54
    ENDERMITE = 55
    AGENT = 56
    VINDICATOR = 57
    PHANTOM = 58
    ILLAGERBEAST = 59
    ARMORSTAND = 61
    TRIPODCAMERA = 62
    PLAYER = 63
    ITEMENTITY = 64
    PRIMEDTNT = 65
    FALLINGBLOCK = 66
    MOVINGBLOCK = 67
    EXPERIENCEPOTION = 68
    EXPERIENCE = 69
    EYEOFENDER = 70
    ENDERCRYSTAL = 71
    FIREWORKSROCKET = 72
    TRIDENT = 73
    TURTLE = 74
    CAT = 75
    SHULKERBULLET = 76
    FISHINGHOOK = 77
    CHALKBOARD = 78
    DRAGONFIREBALL = 79
    ARROW = 80
    SNOWBALL = 81
    THROWNEGG = 82
    PAINTING = 83
    LARGEFIREBALL = 85
    THROWNPOTION = 86
    ENDERPEARL = 87
    LEASHKNOT = 88
    WITHERSKULL = 89
    BOATRIDEABLE = 90
    WITHERSKULLDANGEROUS = 91
    LIGHTNINGBOLT = 93
    SMALLFIREBALL = 94
    AREAEFFECTCLOUD = 95
    LINGERINGPOTION = 101
    LLAMASPIT = 102
    EVOCATIONFANG = 103
    EVOCATIONILLAGER = 104
    VEX = 105
    MINECARTRIDEABLE = 84
    MINECARTHOPPER = 96
    MINECARTTNT = 97
    MINECARTCHEST = 98
    MINECARTFURNACE = 99
    MINECARTCOMMANDBLOCK = 100
    ICEBOMB = 106
    BALLOON = 107
    PUFFERFISH = 108
    SALMON = 109
    DROWNED = 110
    TROPICALFISH = 111
    FISH = 112
    PANDA = 113
    PILLAGER = 114
    VILLAGERV2 = 115
    ZOMBIEVILLAGERV2 = 116
    SHIELD = 117
    WANDERINGTRADER = 118
    LECTERN = 119
    ELDERGUARDIANGHOST = 120
    FOX = 121
    BEE = 122
    PIGLIN = 123
    HOGLIN = 124
    STRIDER = 125
    ZOGLIN = 126
    PIGLINBRUTE = 127
    GOAT = 128
    GLOWSQUID = 129
    AXOLOTL = 130
    WARDEN = 131
    FROG = 132
    TADPOLE = 133
    ALLAY = 134
    CHESTBOATRIDEABLE = 136
    TRADERLLAMA = 137
    CAMEL = 138
    SNIFFER = 139
    BREEZE = 140
    BREEZEWINDCHARGEPROJECTILE = 141
    ARMADILLO = 142
    WINDCHARGEPROJECTILE = 143
    BOGGED = 144
    OMINOUSITEMSPAWNER = 145
    CREAKING = 146