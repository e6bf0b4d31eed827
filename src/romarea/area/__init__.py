"""Loader for ROM-family area files."""

from .errors import (
    InvalidDirection,
    InvalidExitData,
    InvalidNumber,
    InvalidObjectType,
    InvalidObjectWeightCost,
    InvalidResetCommand,
    InvalidRoomAttributes,
    InvalidSectorType,
    InvalidVnum,
    MissingField,
    ParseError,
    UnexpectedEof,
)
from .parser import load_area, parse_area_file
from .types import (
    AreaExit,
    AreaFile,
    AreaHeader,
    AreaObject,
    AreaRoom,
    Direction,
    DoorReset,
    EquipReset,
    ExtraDescription,
    GiveReset,
    MobileReset,
    ObjectReset,
    PutReset,
    RandomizeReset,
    Reset,
    RoomFlags,
    SectorType,
)

__all__ = [
    "AreaExit",
    "AreaFile",
    "AreaHeader",
    "AreaObject",
    "AreaRoom",
    "Direction",
    "DoorReset",
    "EquipReset",
    "ExtraDescription",
    "GiveReset",
    "InvalidDirection",
    "InvalidExitData",
    "InvalidNumber",
    "InvalidObjectType",
    "InvalidObjectWeightCost",
    "InvalidResetCommand",
    "InvalidRoomAttributes",
    "InvalidSectorType",
    "InvalidVnum",
    "MissingField",
    "MobileReset",
    "ObjectReset",
    "ParseError",
    "PutReset",
    "RandomizeReset",
    "Reset",
    "RoomFlags",
    "SectorType",
    "UnexpectedEof",
    "load_area",
    "parse_area_file",
]
