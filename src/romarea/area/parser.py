"""Parse a ROM-family area file into an AreaFile.

The file is a sequence of tagged sections (#AREA, #ROOMS, #OBJECTS,
#RESETS, ...) ending with #$. Sections this loader does not model
(#MOBILES, #SHOPS, #SPECIALS, #HELPS, ...) are skipped line by line.
Format reference: the ROM 2.4 area documentation (area.txt).
"""

from pathlib import Path

from ..logging import get_logger
from .errors import (
    InvalidExitData,
    InvalidObjectType,
    InvalidObjectWeightCost,
    InvalidRoomAttributes,
    InvalidSectorType,
    MissingField,
    ParseError,
)
from .reader import (
    LineCursor,
    lenient_int,
    parse_direction,
    parse_int,
    parse_vnum,
    read_tilde_string,
)
from .resets import parse_resets
from .types import (
    AreaExit,
    AreaFile,
    AreaHeader,
    AreaObject,
    AreaRoom,
    ExtraDescription,
    RoomFlags,
    SectorType,
)

logger = get_logger(__name__)

ROOM_SECTION_END = ("#RESETS", "#MOBILES", "#OBJECTS", "#SHOPS", "#SPECIALS", "#$")
OBJECT_SECTION_END = ("#RESETS", "#MOBILES", "#ROOMS", "#SHOPS", "#SPECIALS", "#$")

_QUOTES = ("'", "\"")


def _section_ended(trimmed: str, markers: tuple[str, ...]) -> bool:
    return trimmed.startswith(markers) or trimmed == "#0"


def _parse_header(cursor: LineCursor) -> AreaHeader:
    """#AREA: filename~ name~ credits~ then 'min_vnum max_vnum'."""
    filename = read_tilde_string(cursor)
    name = read_tilde_string(cursor)
    credits = read_tilde_string(cursor)

    parts = cursor.next().split()
    if len(parts) < 2:
        raise MissingField("vnum range")

    return AreaHeader(
        filename=filename,
        name=name,
        credits=credits,
        min_vnum=parse_int(parts[0], "min_vnum"),
        max_vnum=parse_int(parts[1], "max_vnum"),
    )


def _parse_extra_desc(cursor: LineCursor) -> ExtraDescription:
    cursor.next()  # "E"
    keywords = read_tilde_string(cursor)
    description = read_tilde_string(cursor)
    return ExtraDescription(keywords=tuple(keywords.split()), description=description)


def _parse_exit(cursor: LineCursor) -> AreaExit:
    direction = parse_direction(cursor.next())
    description = read_tilde_string(cursor)
    keyword = read_tilde_string(cursor)

    parts = cursor.next().split()
    if len(parts) < 3:
        raise InvalidExitData()

    return AreaExit(
        direction=direction,
        description=description,
        keyword=keyword or None,
        door_flags=parse_int(parts[0], "door_flags"),
        key_vnum=parse_int(parts[1], "key_vnum"),
        to_room=parse_int(parts[2], "to_room"),
    )


def _parse_room_attributes(line: str) -> tuple[int, RoomFlags, SectorType]:
    parts = line.split()
    if len(parts) < 3:
        raise InvalidRoomAttributes()

    area_vnum = parse_int(parts[0], "area_vnum")
    flags = RoomFlags.from_letters(parts[1])
    code = parse_int(parts[2], "sector_type")
    try:
        sector = SectorType(code)
    except ValueError:
        raise InvalidSectorType(f"Invalid sector type: {code}") from None
    return area_vnum, flags, sector


def _parse_room(cursor: LineCursor) -> AreaRoom:
    vnum = parse_vnum(cursor.next())
    name = read_tilde_string(cursor)
    description = read_tilde_string(cursor)
    area_vnum, room_flags, sector_type = _parse_room_attributes(cursor.next())

    exits: list[AreaExit] = []
    extra_descs: list[ExtraDescription] = []
    while (line := cursor.peek()) is not None:
        trimmed = line.strip()
        if trimmed == "S":
            cursor.skip()
            break
        if trimmed.startswith("D"):
            exits.append(_parse_exit(cursor))
        elif trimmed == "E":
            extra_descs.append(_parse_extra_desc(cursor))
        else:
            cursor.skip()

    return AreaRoom(
        vnum=vnum,
        name=name,
        description=description,
        area_vnum=area_vnum,
        room_flags=room_flags,
        sector_type=sector_type,
        exits=tuple(exits),
        extra_descs=tuple(extra_descs),
    )


def _parse_rooms(cursor: LineCursor) -> list[AreaRoom]:
    rooms = []
    while (line := cursor.peek()) is not None:
        trimmed = line.strip()
        if _section_ended(trimmed, ROOM_SECTION_END):
            break
        if trimmed.startswith("#") and len(trimmed) > 1:
            rooms.append(_parse_room(cursor))
        else:
            cursor.skip()
    return rooms


def _unquote(token: str) -> str:
    if token.startswith(_QUOTES):
        token = token[1:]
    if token.endswith(_QUOTES):
        token = token[:-1]
    return token


def _parse_object(cursor: LineCursor) -> AreaObject:
    vnum = parse_vnum(cursor.next())
    keywords = read_tilde_string(cursor)
    short_description = read_tilde_string(cursor)
    long_description = read_tilde_string(cursor)
    material = read_tilde_string(cursor)

    # "item_type extra_flags wear_flags"
    type_parts = cursor.next().split()
    if not type_parts:
        raise InvalidObjectType()
    item_type = type_parts[0]
    extra_flags = type_parts[1] if len(type_parts) > 1 else "0"
    wear_flags = type_parts[2] if len(type_parts) > 2 else "A"

    # The value slots are lenient: bad or missing numbers become 0.
    values = cursor.next().split()
    value2 = _unquote(values[2]) if len(values) > 2 else "0"

    # "weight cost level condition" is strict.
    stats = cursor.next().split()
    if len(stats) < 4:
        raise InvalidObjectWeightCost()
    weight = parse_int(stats[0], "weight")
    cost = parse_int(stats[1], "cost")
    level = parse_int(stats[2], "level")

    extra_descs: list[ExtraDescription] = []
    while (line := cursor.peek()) is not None:
        trimmed = line.strip()
        if trimmed.startswith("#"):
            break
        if trimmed == "E":
            extra_descs.append(_parse_extra_desc(cursor))
        else:
            cursor.skip()

    return AreaObject(
        vnum=vnum,
        keywords=keywords,
        short_description=short_description,
        long_description=long_description,
        material=material,
        item_type=item_type,
        extra_flags=extra_flags,
        wear_flags=wear_flags,
        value0=lenient_int(values, 0),
        value1=lenient_int(values, 1),
        value2=value2,
        value3=lenient_int(values, 3),
        value4=lenient_int(values, 4),
        weight=weight,
        cost=cost,
        level=level,
        condition=stats[3],
        extra_descs=tuple(extra_descs),
    )


def _parse_objects(cursor: LineCursor) -> list[AreaObject]:
    objects = []
    while (line := cursor.peek()) is not None:
        trimmed = line.strip()
        if _section_ended(trimmed, OBJECT_SECTION_END):
            break
        if trimmed.startswith("#") and len(trimmed) > 1:
            objects.append(_parse_object(cursor))
        else:
            cursor.skip()
    return objects


def parse_area_file(content: str) -> AreaFile:
    """Parse the full text of an area file.

    Raises a ParseError subclass on the first malformed record; its
    ``line`` attribute holds the number of the last line consumed.
    """
    cursor = LineCursor(content)
    header = AreaHeader()
    rooms: list[AreaRoom] = []
    objects: list[AreaObject] = []
    resets = []

    try:
        while (line := cursor.peek()) is not None:
            match line.strip():
                case "#AREA":
                    cursor.skip()
                    header = _parse_header(cursor)
                case "#ROOMS":
                    cursor.skip()
                    rooms = _parse_rooms(cursor)
                case "#OBJECTS":
                    cursor.skip()
                    objects = _parse_objects(cursor)
                case "#RESETS":
                    cursor.skip()
                    resets = parse_resets(cursor)
                case "#$":
                    break
                case _:
                    cursor.skip()
    except ParseError as err:
        if err.line is None:
            err.line = cursor.line_number
        raise

    return AreaFile(
        header=header,
        rooms=tuple(rooms),
        objects=tuple(objects),
        resets=tuple(resets),
    )


def load_area(path: Path, encoding: str = "latin-1") -> AreaFile:
    """Read an area file from disk and parse it."""
    content = Path(path).read_text(encoding=encoding, errors="replace")
    area = parse_area_file(content)
    logger.debug(
        "area_parsed",
        path=str(path),
        area=area.header.name,
        rooms=len(area.rooms),
        objects=len(area.objects),
        resets=len(area.resets),
    )
    return area
