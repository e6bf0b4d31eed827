"""Loader and importer for ROM-family MUD area files."""

import argparse
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from .config import Config
from .logging import configure_logging, get_logger
from .area import AreaFile, ParseError, load_area, parse_area_file
from .importer import InvalidVnumRange, import_area

__all__ = ["main", "Config", "AreaFile", "load_area", "parse_area_file", "import_area"]


def _build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="romarea",
        description="Parse ROM area files and import them into the world database.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Area files (.are)")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Parse and report only; store nothing",
    )
    parser.add_argument(
        "--database-url",
        default=config.database_url,
        help=f"Database URL (default: {config.database_url})",
    )
    parser.add_argument(
        "--encoding",
        default=config.encoding,
        help=f"Text encoding of the area files (default: {config.encoding})",
    )
    parser.add_argument("--log-level", default=config.log_level)
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=config.json_logs,
        help="Emit JSON log lines",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse every file, then import them unless --dry-run."""
    config = Config.from_env()
    args = _build_parser(config).parse_args(argv)

    configure_logging(
        log_level=args.log_level,
        log_file=config.log_file,
        json_logs=args.json_logs,
        max_string=config.log_max_string,
    )

    logger = get_logger(__name__)
    logger.info("romarea_starting", files=len(args.files), dry_run=args.dry_run)

    failures = 0
    parsed: list[tuple[Path, AreaFile]] = []
    for path in args.files:
        try:
            parsed.append((path, load_area(path, encoding=args.encoding)))
        except (OSError, ParseError) as exc:
            failures += 1
            logger.error("area_parse_failed", path=str(path), error=str(exc))

    if args.dry_run:
        for path, area in parsed:
            logger.info(
                "area_parsed",
                path=str(path),
                area=area.header.name,
                min_vnum=area.header.min_vnum,
                max_vnum=area.header.max_vnum,
                rooms=len(area.rooms),
                objects=len(area.objects),
                resets=len(area.resets),
            )
        return 1 if failures else 0

    engine = create_engine(args.database_url)
    SQLModel.metadata.create_all(engine)
    known_ranges = [(area.header.min_vnum, area.header.max_vnum) for _, area in parsed]

    imported = 0
    with Session(engine) as db_session:
        for path, area in parsed:
            try:
                import_area(db_session, area, known_ranges)
                imported += 1
            except (InvalidVnumRange, SQLAlchemyError) as exc:
                db_session.rollback()
                failures += 1
                logger.error("area_import_failed", path=str(path), error=str(exc))

    logger.info("romarea_finished", imported=imported, failed=failures)
    return 1 if failures else 0
