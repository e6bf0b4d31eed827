"""Immutable records produced by the area-file parser.

Nothing here points back into the source text: every field is a plain
string, integer, enum or tuple, and vnum references are left unresolved.
"""

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3
    UP = 4
    DOWN = 5

    @property
    def label(self) -> str:
        return self.name.lower()


class SectorType(IntEnum):
    INSIDE = 0
    CITY = 1
    FIELD = 2
    FOREST = 3
    HILLS = 4
    MOUNTAIN = 5
    WATER_SWIM = 6
    WATER_NOSWIM = 7
    UNDERWATER = 8
    AIR = 9
    DESERT = 10

    @property
    def label(self) -> str:
        return SECTOR_LABELS[self]


SECTOR_LABELS = {
    SectorType.INSIDE: "inside",
    SectorType.CITY: "city",
    SectorType.FIELD: "field",
    SectorType.FOREST: "forest",
    SectorType.HILLS: "hills",
    SectorType.MOUNTAIN: "mountain",
    SectorType.WATER_SWIM: "water (shallow)",
    SectorType.WATER_NOSWIM: "water (deep)",
    SectorType.UNDERWATER: "underwater",
    SectorType.AIR: "air",
    SectorType.DESERT: "desert",
}


class RoomFlags(IntFlag):
    """Room behavior bits, stored as ROM bit positions."""

    DARK = 1 << 0
    NO_MOB = 1 << 2
    INDOORS = 1 << 3
    PRIVATE = 1 << 9
    SAFE = 1 << 10
    SOLITARY = 1 << 11
    PET_SHOP = 1 << 12
    NO_RECALL = 1 << 13
    IMP_ONLY = 1 << 14
    GODS_ONLY = 1 << 15
    HEROES_ONLY = 1 << 16
    NEWBIES_ONLY = 1 << 17
    LAW = 1 << 18
    NOWHERE = 1 << 19
    BANK = 1 << 20
    ARENA = 1 << 21

    @classmethod
    def from_letters(cls, letters: str) -> "RoomFlags":
        """Decode a string like "CDS"; unknown letters are ignored."""
        flags = cls(0)
        for letter in letters:
            flags |= ROOM_FLAG_LETTERS.get(letter, cls(0))
        return flags


# IMP_ONLY and NOWHERE have no letter in area files.
ROOM_FLAG_LETTERS = {
    "A": RoomFlags.ARENA,
    "B": RoomFlags.BANK,
    "C": RoomFlags.NO_RECALL,
    "D": RoomFlags.DARK,
    "G": RoomFlags.GODS_ONLY,
    "H": RoomFlags.HEROES_ONLY,
    "I": RoomFlags.INDOORS,
    "J": RoomFlags.PRIVATE,
    "K": RoomFlags.NO_MOB,
    "L": RoomFlags.LAW,
    "N": RoomFlags.NEWBIES_ONLY,
    "O": RoomFlags.SOLITARY,
    "P": RoomFlags.PET_SHOP,
    "S": RoomFlags.SAFE,
}


@dataclass(frozen=True)
class AreaHeader:
    filename: str = ""
    name: str = ""
    credits: str = ""
    min_vnum: int = 0
    max_vnum: int = 0

    def contains(self, vnum: int) -> bool:
        return self.min_vnum <= vnum <= self.max_vnum


@dataclass(frozen=True)
class ExtraDescription:
    """Text shown when a player looks at one of the keywords."""

    keywords: tuple[str, ...]
    description: str


@dataclass(frozen=True)
class AreaExit:
    direction: Direction
    description: str
    keyword: str | None
    door_flags: int
    key_vnum: int
    to_room: int  # not resolved; may live in another area


@dataclass(frozen=True)
class AreaRoom:
    vnum: int
    name: str
    description: str
    area_vnum: int
    room_flags: RoomFlags
    sector_type: SectorType
    exits: tuple[AreaExit, ...] = ()
    extra_descs: tuple[ExtraDescription, ...] = ()


@dataclass(frozen=True)
class AreaObject:
    """An object template.

    The value slots are opaque here; their meaning depends on item_type.
    value2 stays a string because it may be a number or a quoted name.
    """

    vnum: int
    keywords: str
    short_description: str
    long_description: str
    material: str
    item_type: str
    extra_flags: str = "0"
    wear_flags: str = "A"
    value0: int = 0
    value1: int = 0
    value2: str = "0"
    value3: int = 0
    value4: int = 0
    weight: int = 0
    cost: int = 0
    level: int = 0
    condition: str = "P"
    extra_descs: tuple[ExtraDescription, ...] = ()


@dataclass(frozen=True)
class MobileReset:
    """M: load a mobile into a room."""

    if_flag: int
    mob_vnum: int
    limit: int
    room_vnum: int
    max_in_room: int


@dataclass(frozen=True)
class ObjectReset:
    """O: place an object on a room floor."""

    if_flag: int
    obj_vnum: int
    limit: int
    room_vnum: int


@dataclass(frozen=True)
class GiveReset:
    """G: give an object to the last loaded mobile."""

    if_flag: int
    obj_vnum: int
    limit: int


@dataclass(frozen=True)
class EquipReset:
    """E: equip the last loaded mobile with an object."""

    if_flag: int
    obj_vnum: int
    limit: int
    wear_location: int


@dataclass(frozen=True)
class PutReset:
    """P: put an object inside a container object."""

    if_flag: int
    obj_vnum: int
    limit: int
    container_vnum: int


@dataclass(frozen=True)
class DoorReset:
    """D: set the state of a door."""

    room_vnum: int
    direction: int
    state: int


@dataclass(frozen=True)
class RandomizeReset:
    """R: shuffle the first num_exits exits of a room."""

    room_vnum: int
    num_exits: int


Reset = (
    MobileReset
    | ObjectReset
    | GiveReset
    | EquipReset
    | PutReset
    | DoorReset
    | RandomizeReset
)


@dataclass(frozen=True)
class AreaFile:
    """Everything parsed from one area file."""

    header: AreaHeader = field(default_factory=AreaHeader)
    rooms: tuple[AreaRoom, ...] = ()
    objects: tuple[AreaObject, ...] = ()
    resets: tuple[Reset, ...] = ()
