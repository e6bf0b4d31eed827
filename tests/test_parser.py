"""Tests for the section dispatcher, header and room parsing."""

import pytest

from romarea.area import (
    AreaFile,
    Direction,
    InvalidDirection,
    InvalidExitData,
    InvalidNumber,
    InvalidRoomAttributes,
    InvalidSectorType,
    InvalidVnum,
    MissingField,
    ParseError,
    RoomFlags,
    SectorType,
    UnexpectedEof,
    load_area,
    parse_area_file,
)

HEADER = "#AREA\nfile~\nMy Area~\nCredits~\n100 199\n"


def rooms_file(body: str) -> str:
    return HEADER + "#ROOMS\n" + body + "#0\n#$\n"


def test_header_only():
    area = parse_area_file(HEADER + "#ROOMS\n#$\n")
    assert area.header.filename == "file"
    assert area.header.name == "My Area"
    assert area.header.credits == "Credits"
    assert area.header.min_vnum == 100
    assert area.header.max_vnum == 199
    assert area.rooms == ()


def test_header_accepts_inverted_range():
    """min > max is left for the caller to reject."""
    area = parse_area_file("#AREA\nf~\nn~\nc~\n500 100\n#$\n")
    assert area.header.min_vnum == 500
    assert area.header.max_vnum == 100


def test_header_ignores_extra_vnum_tokens():
    area = parse_area_file("#AREA\nf~\nn~\nc~\n100 199 extra 7\n#$\n")
    assert (area.header.min_vnum, area.header.max_vnum) == (100, 199)


def test_header_missing_vnum():
    with pytest.raises(MissingField) as excinfo:
        parse_area_file("#AREA\nf~\nn~\nc~\n100\n#$\n")
    assert excinfo.value.name == "vnum range"


def test_header_bad_vnum():
    with pytest.raises(InvalidNumber):
        parse_area_file("#AREA\nf~\nn~\nc~\n100 abc\n#$\n")


def test_header_vnum_out_of_range():
    with pytest.raises(InvalidNumber) as excinfo:
        parse_area_file("#AREA\nf~\nn~\nc~\n1 99999999999999999999\n#$\n")
    assert excinfo.value.field == "max_vnum"
    assert excinfo.value.line == 5


def test_header_truncated():
    with pytest.raises(UnexpectedEof):
        parse_area_file("#AREA\nf~\nn~\nc~\n")


def test_empty_input():
    assert parse_area_file("") == AreaFile()


def test_unknown_sections_are_skipped():
    text = (
        "#HELPS\n0 HELP~\nSome help text.\n~\n0 $~\n\n"
        + HEADER
        + "#MOBILES\n#3000\nwizard~\n#0\n"
        + "#SHOPS\n0\n#SPECIALS\nS\n"
        + "#$\n"
    )
    area = parse_area_file(text)
    assert area.header.name == "My Area"
    assert area.rooms == ()


def test_text_after_end_marker_is_ignored():
    area = parse_area_file(HEADER + "#$\n#ROOMS\n#3001\nbroken\n")
    assert area.rooms == ()


def test_single_room():
    area = parse_area_file(
        rooms_file("#3001\nTown Square~\nA busy square.~\n0 CDS 1\nS\n")
    )
    assert len(area.rooms) == 1
    room = area.rooms[0]
    assert room.vnum == 3001
    assert room.name == "Town Square"
    assert room.description == "A busy square."
    assert room.area_vnum == 0
    assert room.sector_type == SectorType.CITY
    assert RoomFlags.NO_RECALL in room.room_flags
    assert RoomFlags.DARK in room.room_flags
    assert RoomFlags.SAFE in room.room_flags
    assert room.exits == ()
    assert room.extra_descs == ()


def test_room_flags_ignore_unknown_letters():
    area = parse_area_file(rooms_file("#3001\nRoom~\nDesc~\n0 DZQ 0\nS\n"))
    assert area.rooms[0].room_flags == RoomFlags.DARK


def test_room_flags_numeric_zero():
    area = parse_area_file(rooms_file("#3001\nRoom~\nDesc~\n0 0 0\nS\n"))
    assert area.rooms[0].room_flags == RoomFlags(0)


def test_room_exit():
    body = (
        "#3001\nTown Square~\nA busy square.~\n0 0 1\n"
        "D0\nYou see a gate.~\ngate~\n0 0 3002\nS\n"
    )
    room = parse_area_file(rooms_file(body)).rooms[0]
    assert len(room.exits) == 1
    exit_ = room.exits[0]
    assert exit_.direction == Direction.NORTH
    assert exit_.description == "You see a gate."
    assert exit_.keyword == "gate"
    assert exit_.door_flags == 0
    assert exit_.key_vnum == 0
    assert exit_.to_room == 3002


def test_room_exit_empty_keyword_is_none():
    body = "#3001\nR~\nD~\n0 0 1\nD3\n~\n~\n1 -1 3000\nS\n"
    exit_ = parse_area_file(rooms_file(body)).rooms[0].exits[0]
    assert exit_.direction == Direction.WEST
    assert exit_.description == ""
    assert exit_.keyword is None
    assert exit_.key_vnum == -1


def test_room_duplicate_exits_are_kept():
    body = (
        "#3001\nR~\nD~\n0 0 1\n"
        "D0\n~\n~\n0 0 3002\n"
        "D0\n~\n~\n0 0 3003\nS\n"
    )
    exits = parse_area_file(rooms_file(body)).rooms[0].exits
    assert [e.to_room for e in exits] == [3002, 3003]


def test_room_extra_description():
    body = "#3001\nR~\nD~\n0 0 1\nE\nwell Well  old~\nA deep well.\n~\nS\n"
    room = parse_area_file(rooms_file(body)).rooms[0]
    assert len(room.extra_descs) == 1
    assert room.extra_descs[0].keywords == ("well", "Well", "old")
    assert room.extra_descs[0].description == "A deep well."


def test_room_skips_stray_lines():
    body = (
        "\n* a comment\n#3001\nR~\nD~\n0 0 1\n\nfoo\nS\n"
        "\n#3002\nR2~\nD2~\n0 0 0\nS\n"
    )
    rooms = parse_area_file(rooms_file(body)).rooms
    assert [r.vnum for r in rooms] == [3001, 3002]


def test_room_section_stops_at_next_section():
    text = HEADER + "#ROOMS\n#3001\nR~\nD~\n0 0 1\nS\n#RESETS\nM 0 1 1 3001 1\nS\n#$\n"
    area = parse_area_file(text)
    assert len(area.rooms) == 1
    assert len(area.resets) == 1


@pytest.mark.parametrize("marker", ["#MOBILES", "#SHOPS", "#SPECIALS", "#$"])
def test_room_section_leaves_marker(marker: str):
    """Lines after the marker would be a broken room if it were consumed."""
    text = (
        HEADER
        + "#ROOMS\n#3001\nR~\nD~\n0 0 1\nS\n"
        + marker
        + "\n#3002\nwizard~\n#0\n#$\n"
    )
    rooms = parse_area_file(text).rooms
    assert [r.vnum for r in rooms] == [3001]


def test_room_section_stops_at_objects():
    text = (
        HEADER
        + "#ROOMS\n#3001\nR~\nD~\n0 0 1\nS\n"
        + "#OBJECTS\n#3010\nlamp~\na lamp~\nA lamp.~\nbrass~\nlight\n0\n1 1 1 P\n"
        + "#0\n#$\n"
    )
    area = parse_area_file(text)
    assert [r.vnum for r in area.rooms] == [3001]
    assert [o.vnum for o in area.objects] == [3010]


def test_room_invalid_sector():
    with pytest.raises(InvalidSectorType):
        parse_area_file(rooms_file("#3001\nR~\nD~\n0 0 11\nS\n"))


def test_room_short_attributes():
    with pytest.raises(InvalidRoomAttributes):
        parse_area_file(rooms_file("#3001\nR~\nD~\n0 0\nS\n"))


def test_room_invalid_vnum():
    with pytest.raises(InvalidVnum):
        parse_area_file(rooms_file("#30x1\nR~\nD~\n0 0 0\nS\n"))


def test_exit_invalid_direction():
    with pytest.raises(InvalidDirection):
        parse_area_file(rooms_file("#3001\nR~\nD~\n0 0 0\nD7\n~\n~\n0 0 1\nS\n"))


def test_exit_short_data_line():
    with pytest.raises(InvalidExitData):
        parse_area_file(rooms_file("#3001\nR~\nD~\n0 0 0\nD0\n~\n~\n0 3002\nS\n"))


def test_exit_non_numeric_data():
    with pytest.raises(InvalidNumber):
        parse_area_file(rooms_file("#3001\nR~\nD~\n0 0 0\nD0\n~\n~\n0 x 3002\nS\n"))


@pytest.mark.parametrize(
    "text",
    [
        "#AREA\nfile~\nMy Area~\nCredits\n",
        HEADER + "#ROOMS\n#3001\nTown Square\n",
        HEADER + "#ROOMS\n#3001\nTown Square~\nA busy square.\nStill going.\n",
        HEADER + "#ROOMS\n#3001\nR~\nD~\n0 0 1\nD0\nYou see a gate.~\ngate\n",
        HEADER + "#ROOMS\n#3001\nR~\nD~\n0 0 1\nE\nwell~\nA deep well.\n",
    ],
)
def test_truncated_tilde_field(text: str):
    with pytest.raises(UnexpectedEof):
        parse_area_file(text)


def test_error_carries_line_number():
    text = rooms_file("#3001\nR~\nD~\n0 0 42\nS\n")
    with pytest.raises(ParseError) as excinfo:
        parse_area_file(text)
    # the attributes line is line 10
    assert excinfo.value.line == 10
    assert "line 10" in str(excinfo.value)
    assert isinstance(excinfo.value, InvalidSectorType)


def test_parse_is_idempotent(area_text: str):
    assert parse_area_file(area_text) == parse_area_file(area_text)


def test_sample_area(area: AreaFile):
    assert area.header.name == "Quiet Hamlet"
    assert area.header.credits == "{ 1 10} Builder Quiet Hamlet"
    assert (area.header.min_vnum, area.header.max_vnum) == (3000, 3099)
    assert [r.vnum for r in area.rooms] == [3001, 3002, 3003]
    assert [o.vnum for o in area.objects] == [3010, 3011, 3012]
    assert len(area.resets) == 7


def test_sample_multi_line_description(area: AreaFile):
    square = area.rooms[0]
    assert square.description == (
        "The village square is quiet.  A well stands in the middle\n"
        "of the square.\n"
        "\n"
        "Paths lead north and east."
    )
    assert [e.direction for e in square.exits] == [
        Direction.NORTH,
        Direction.EAST,
        Direction.SOUTH,
    ]
    assert square.exits[0].door_flags == 1
    assert square.exits[0].key_vnum == 3010
    assert square.extra_descs[0].keywords == ("well",)


def test_sample_sectors(area: AreaFile):
    assert [r.sector_type for r in area.rooms] == [
        SectorType.CITY,
        SectorType.INSIDE,
        SectorType.FIELD,
    ]
    assert area.rooms[1].room_flags == RoomFlags.INDOORS


def test_records_are_frozen(area: AreaFile):
    with pytest.raises(AttributeError):
        area.rooms[0].name = "Renamed"


def test_load_area(area_path, area: AreaFile):
    assert load_area(area_path) == area
