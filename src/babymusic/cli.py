"""Command-line interface for the mode playlists."""

import argparse
import sys
from typing import List, Optional

from . import config
from .catalog import CatalogService
from .errors import BabyMusicError
from .logging_config import configure_logging, get_logger
from .modes import MODE_VALUES
from .selection import select_next
from .store import PlaylistStore

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(description="Baby music playlist manager")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--database-url", help="SQLAlchemy database URL")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the web API")
    serve_parser.add_argument("--host", default=config.HOST, help="Interface to bind")
    serve_parser.add_argument("--port", type=int, default=config.PORT, help="Port to listen on")

    # Init command
    subparsers.add_parser("init", help="Seed default videos into an empty database")

    # List command
    list_parser = subparsers.add_parser("list", help="List videos of a mode")
    list_parser.add_argument("mode", choices=MODE_VALUES, help="Playback mode")

    # Add command
    add_parser = subparsers.add_parser("add", help="Add a video to a mode")
    add_parser.add_argument("mode", choices=MODE_VALUES, help="Playback mode")
    add_parser.add_argument("video", help="YouTube URL or video ID")

    # Remove command
    remove_parser = subparsers.add_parser("remove", help="Remove a video by id")
    remove_parser.add_argument("mode", choices=MODE_VALUES, help="Playback mode")
    remove_parser.add_argument("id", type=int, help="Entry id")

    # Next command
    next_parser = subparsers.add_parser("next", help="Pick the next video to play")
    next_parser.add_argument("mode", choices=MODE_VALUES, help="Playback mode")
    next_parser.add_argument("--current", help="Video ID playing now")

    return parser


def serve(host: str, port: int, database_url: Optional[str] = None) -> None:
    """Run the web API with uvicorn."""
    if database_url:
        config.DATABASE_URL = database_url

    import uvicorn

    from .webapi import app

    logger.info("Baby Music server running on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


def run_command(args: argparse.Namespace, catalog: CatalogService) -> int:
    """Execute a parsed catalog command.

    Args:
        args: Parsed arguments
        catalog: Catalog service to operate on

    Returns:
        int: Exit code
    """
    if args.command == "init":
        seeded = catalog.bootstrap()
        if seeded:
            logger.info("Seeded %d default videos", seeded)
        else:
            logger.info("Database already initialized")
    elif args.command == "list":
        for entry in catalog.list_urls(args.mode):
            logger.info("%d %s", entry.id, entry.video_id)
    elif args.command == "add":
        entry = catalog.add_url(args.mode, args.video)
        logger.info("Added %s to %s with id %d", entry.video_id, entry.mode, entry.id)
    elif args.command == "remove":
        if not catalog.remove_url(args.mode, args.id):
            logger.info("No entry with id %d", args.id)
    elif args.command == "next":
        logger.info("%s", select_next(catalog.video_ids(args.mode), args.current))
    else:
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        int: Exit code
    """
    parser = create_parser()
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parser.parse_args(args=argv if argv else ["--help"])
    except SystemExit as e:
        return 1 if e.code == 2 else e.code

    configure_logging(debug=args.debug)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == "serve":
            serve(args.host, args.port, args.database_url)
            return 0

        store = PlaylistStore(args.database_url)
        try:
            return run_command(args, CatalogService(store))
        finally:
            store.close()
    except BabyMusicError as e:
        logger.error("Command failed: %s", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
