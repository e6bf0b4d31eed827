"""Parse the #RESETS section.

Each reset is one line: a command letter followed by integer arguments.
Commands this loader does not model are skipped, not rejected.

The section ends at an 'S' line or at the first line starting with '#'
(#SHOPS, #SPECIALS, #$, but also #0 or another section header), so a
reset section missing its 'S' never swallows the section after it.
"""

from .errors import InvalidResetCommand
from .reader import LineCursor, parse_int
from .types import (
    DoorReset,
    EquipReset,
    GiveReset,
    MobileReset,
    ObjectReset,
    PutReset,
    RandomizeReset,
    Reset,
)

RESET_LAYOUTS: dict[str, tuple[type, tuple[str, ...]]] = {
    "M": (MobileReset, ("if_flag", "mob_vnum", "limit", "room_vnum", "max_in_room")),
    "O": (ObjectReset, ("if_flag", "obj_vnum", "limit", "room_vnum")),
    "G": (GiveReset, ("if_flag", "obj_vnum", "limit")),
    "E": (EquipReset, ("if_flag", "obj_vnum", "limit", "wear_location")),
    "P": (PutReset, ("if_flag", "obj_vnum", "limit", "container_vnum")),
    "D": (DoorReset, ("room_vnum", "direction", "state")),
    "R": (RandomizeReset, ("room_vnum", "num_exits")),
}

# Stock ROM files write "D 0 <room> <dir> <state>" and "R 0 <room> <n>";
# the leading if_flag is dropped when present.
_LEADING_IF_FLAG = {"D", "R"}


def parse_reset_line(line: str) -> Reset | None:
    """Parse one reset line; None for blank, comment or unknown commands."""
    body = line.split("*", 1)[0]
    tokens = body.split()
    if not tokens:
        return None

    command, args = tokens[0], tokens[1:]
    layout = RESET_LAYOUTS.get(command)
    if layout is None:
        return None

    cls, fields = layout
    if len(args) < len(fields):
        raise InvalidResetCommand(
            f"Invalid reset command: {command} needs {len(fields)} arguments, "
            f"got {len(args)}"
        )
    if command in _LEADING_IF_FLAG and len(args) > len(fields):
        args = args[1:]

    values = {
        name: parse_int(token, f"{command} {name}")
        for name, token in zip(fields, args)
    }
    return cls(**values)


def parse_resets(cursor: LineCursor) -> list[Reset]:
    """Consume reset lines up to 'S' (consumed) or a section marker."""
    resets: list[Reset] = []
    while (line := cursor.peek()) is not None:
        trimmed = line.strip()
        if trimmed.startswith("#"):
            break
        cursor.skip()
        if trimmed == "S":
            break
        if not trimmed or trimmed.startswith("*"):
            continue
        reset = parse_reset_line(trimmed)
        if reset is not None:
            resets.append(reset)
    return resets
