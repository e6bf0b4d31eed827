"""Shared test fixtures for romarea."""

from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from romarea.area import AreaFile, parse_area_file

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def area_path() -> Path:
    return DATA_DIR / "hamlet.are"


@pytest.fixture
def area_text(area_path: Path) -> str:
    return area_path.read_text(encoding="latin-1")


@pytest.fixture
def area(area_text: str) -> AreaFile:
    return parse_area_file(area_text)


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path}/test.db"


@pytest.fixture
def db_engine(db_url: str):
    engine = create_engine(db_url)
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def db_session(db_engine):
    with Session(db_engine) as session:
        yield session
