"""Database models for imported areas."""

import datetime as dt

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, SQLModel


class Area(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True)
    filename: str
    min_vnum: int
    max_vnum: int
    rooms_count: int = 0
    exits_count: int = 0
    objects_count: int = 0
    imported_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.UTC)
    )
    updated_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.UTC)
    )


class Room(SQLModel, table=True):
    room_id: str = Field(primary_key=True)  # "vnum_<vnum>"
    vnum: int = Field(index=True)
    area_name: str = Field(index=True)
    name: str
    description: str = ""
    room_flags: int = 0
    sector: str = "inside"


class Exit(SQLModel, table=True):
    __table_args__ = (UniqueConstraint("from_room_id", "direction"),)

    id: int | None = Field(default=None, primary_key=True)
    from_room_id: str = Field(foreign_key="room.room_id", index=True)
    direction: str
    to_room_id: str = Field(index=True)
    keyword: str | None = None
    door_flags: int = 0
    key_vnum: int = 0


class ItemTemplate(SQLModel, table=True):
    __tablename__ = "objects"

    id: int | None = Field(default=None, primary_key=True)
    vnum: int = Field(unique=True, index=True)
    area_name: str = Field(index=True)
    keywords: str
    short_description: str
    long_description: str
    material: str
    item_type: str
    extra_flags: str = ""
    wear_flags: str = ""
    value0: int = 0
    value1: int = 0
    value2: str = ""  # numeric or a name, depending on item_type
    value3: int = 0
    value4: int = 0
    weight: int = 0
    cost: int = 0
    level: int = 0
    condition: str = "P"
    extra_descriptions: list[dict] = Field(
        default_factory=list, sa_column=Column(JSON)
    )
