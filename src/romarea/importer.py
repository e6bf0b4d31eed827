"""Import parsed area files into the world database.

Parsing leaves every vnum reference unresolved. This module is the
separate pass that assigns stable room identifiers, checks exit targets
against the vnum ranges of every known area and stores the result.
Re-importing an area replaces whatever an earlier import stored for it.
"""

import datetime as dt
from collections.abc import Iterable
from dataclasses import asdict, dataclass

from sqlmodel import Session, col, or_, select

from .area.types import AreaFile, AreaHeader, AreaObject, AreaRoom
from .logging import get_logger
from .models import Area, Exit, ItemTemplate, Room

logger = get_logger(__name__)


class InvalidVnumRange(ValueError):
    """An area header claims min_vnum > max_vnum."""


@dataclass
class ImportSummary:
    area_name: str
    rooms_created: int = 0
    exits_created: int = 0
    exits_dropped: int = 0
    objects_created: int = 0


def room_id_for(vnum: int) -> str:
    """Stable room identifier for a vnum."""
    return f"vnum_{vnum}"


def check_vnum_range(header: AreaHeader) -> None:
    if header.min_vnum > header.max_vnum:
        raise InvalidVnumRange(
            f"Area {header.name!r} has min_vnum {header.min_vnum} "
            f"> max_vnum {header.max_vnum}"
        )


def build_room_index(area_files: Iterable[AreaFile]) -> dict[int, AreaRoom]:
    """Map vnum to room across several parsed files; later files win."""
    index: dict[int, AreaRoom] = {}
    for area_file in area_files:
        for room in area_file.rooms:
            index[room.vnum] = room
    return index


def _in_ranges(vnum: int, ranges: Iterable[tuple[int, int]]) -> bool:
    return any(low <= vnum <= high for low, high in ranges)


def _stored_ranges(db_session: Session) -> list[tuple[int, int]]:
    rows = db_session.exec(select(Area.min_vnum, Area.max_vnum)).all()
    return [(low, high) for low, high in rows]


def _clear_previous(db_session: Session, area_file: AreaFile) -> None:
    """Delete rows left by an earlier import of this area or its vnums."""
    area_name = area_file.header.name
    room_ids = [room_id_for(room.vnum) for room in area_file.rooms]
    object_vnums = [obj.vnum for obj in area_file.objects]

    stale_rooms = db_session.exec(
        select(Room).where(
            or_(Room.area_name == area_name, col(Room.room_id).in_(room_ids))
        )
    ).all()
    stale_ids = [room.room_id for room in stale_rooms]
    if stale_ids:
        stale_exits = db_session.exec(
            select(Exit).where(col(Exit.from_room_id).in_(stale_ids))
        ).all()
        for exit_row in stale_exits:
            db_session.delete(exit_row)
    for room in stale_rooms:
        db_session.delete(room)

    stale_objects = db_session.exec(
        select(ItemTemplate).where(
            or_(
                ItemTemplate.area_name == area_name,
                col(ItemTemplate.vnum).in_(object_vnums),
            )
        )
    ).all()
    for obj in stale_objects:
        db_session.delete(obj)

    db_session.flush()


def _object_row(area_name: str, obj: AreaObject) -> ItemTemplate:
    return ItemTemplate(
        vnum=obj.vnum,
        area_name=area_name,
        keywords=obj.keywords,
        short_description=obj.short_description,
        long_description=obj.long_description,
        material=obj.material,
        item_type=obj.item_type,
        extra_flags=obj.extra_flags,
        wear_flags=obj.wear_flags,
        value0=obj.value0,
        value1=obj.value1,
        value2=obj.value2,
        value3=obj.value3,
        value4=obj.value4,
        weight=obj.weight,
        cost=obj.cost,
        level=obj.level,
        condition=obj.condition,
        extra_descriptions=[
            {"keywords": list(extra.keywords), "description": extra.description}
            for extra in obj.extra_descs
        ],
    )


def _upsert_area(
    db_session: Session, summary: ImportSummary, header: AreaHeader
) -> Area:
    now = dt.datetime.now(dt.UTC)
    area = db_session.exec(select(Area).where(Area.name == header.name)).first()
    if area is None:
        area = Area(
            name=header.name,
            filename=header.filename,
            min_vnum=header.min_vnum,
            max_vnum=header.max_vnum,
            imported_at=now,
        )
        db_session.add(area)
    else:
        area.filename = header.filename
        area.min_vnum = header.min_vnum
        area.max_vnum = header.max_vnum
    area.rooms_count = summary.rooms_created
    area.exits_count = summary.exits_created
    area.objects_count = summary.objects_created
    area.updated_at = now
    return area


def import_area(
    db_session: Session,
    area_file: AreaFile,
    known_ranges: Iterable[tuple[int, int]] = (),
) -> ImportSummary:
    """Store one parsed area; exits leading outside every known area are dropped."""
    header = area_file.header
    check_vnum_range(header)

    ranges = [(header.min_vnum, header.max_vnum), *known_ranges]
    ranges.extend(_stored_ranges(db_session))

    _clear_previous(db_session, area_file)
    summary = ImportSummary(area_name=header.name)

    # Duplicate vnums within one file: the later definition wins.
    rooms = {room.vnum: room for room in area_file.rooms}
    objects = {obj.vnum: obj for obj in area_file.objects}

    for area_room in rooms.values():
        room_id = room_id_for(area_room.vnum)
        db_session.add(
            Room(
                room_id=room_id,
                vnum=area_room.vnum,
                area_name=header.name,
                name=area_room.name,
                description=area_room.description,
                room_flags=int(area_room.room_flags),
                sector=area_room.sector_type.label,
            )
        )
        summary.rooms_created += 1

        seen_directions = set()
        for area_exit in area_room.exits:
            if not _in_ranges(area_exit.to_room, ranges):
                summary.exits_dropped += 1
                logger.warning(
                    "exit_dropped",
                    room=area_room.vnum,
                    direction=area_exit.direction.label,
                    to_room=area_exit.to_room,
                    reason="outside_known_areas",
                )
                continue
            if area_exit.direction in seen_directions:
                summary.exits_dropped += 1
                logger.warning(
                    "exit_dropped",
                    room=area_room.vnum,
                    direction=area_exit.direction.label,
                    to_room=area_exit.to_room,
                    reason="duplicate_direction",
                )
                continue
            seen_directions.add(area_exit.direction)
            db_session.add(
                Exit(
                    from_room_id=room_id,
                    direction=area_exit.direction.label,
                    to_room_id=room_id_for(area_exit.to_room),
                    keyword=area_exit.keyword,
                    door_flags=area_exit.door_flags,
                    key_vnum=area_exit.key_vnum,
                )
            )
            summary.exits_created += 1

    for obj in objects.values():
        db_session.add(_object_row(header.name, obj))
        summary.objects_created += 1

    _upsert_area(db_session, summary, header)
    db_session.commit()

    logger.info("area_imported", **asdict(summary))
    return summary
