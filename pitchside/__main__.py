"""Entry point for pitchside package."""

import argparse
import asyncio
import logging
import sys

from pitchside.core.config import BENCH_POLICIES, BoardConfig, set_config
from pitchside.core.formations import list_formations


def build_config(args: argparse.Namespace) -> BoardConfig:
    config = BoardConfig()
    if args.formation:
        config.formation_name = args.formation
    if args.bench:
        config.bench.policy = args.bench
    if args.source and args.source.lower().startswith(("http://", "https://")):
        config.source_url = args.source
    return config


def dump_layout(controller) -> None:
    """Print the assigned layout as a table."""
    from rich.console import Console
    from rich.table import Table

    from pitchside.core.colors import entity_color
    from pitchside.core.models.entity import Player

    table = Table(title=f"Layout ({controller.status_message})")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("No.", justify="right")
    table.add_column("Grade", justify="right")
    table.add_column("Role")
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")
    table.add_column("World (x, z)", justify="right")

    colors = controller.config.colors
    for entity in controller.store.entities():
        world = controller.projector.board_to_world(entity.position)
        color = entity_color(entity, colors)
        if isinstance(entity, Player):
            cells = [entity.name, entity.number, str(entity.grade or "-"), entity.role]
        else:
            cells = ["Ball", "", "", ""]
        table.add_row(
            f"[{color}]{entity.id}[/]",
            *cells,
            f"{entity.x:.1f}",
            f"{entity.y:.1f}",
            f"{world.x:.1f}, {world.z:.1f}",
        )

    Console().print(table)


def main() -> None:
    """Main entry point for the Pitchside application."""
    parser = argparse.ArgumentParser(
        description="Pitchside - tactical board with a 3D view",
        prog="pitchside",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Roster sheet: published CSV URL or local file (default: $PITCHSIDE_SHEET_URL)",
    )
    parser.add_argument(
        "--formation",
        choices=list_formations(),
        default=None,
        help="Starter formation table",
    )
    parser.add_argument(
        "--bench",
        choices=BENCH_POLICIES,
        default=None,
        help="Bench placement policy",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the assigned layout and exit (no TUI)",
    )
    parser.add_argument(
        "--api",
        action="store_true",
        help="Serve the board over HTTP/WebSocket instead of the TUI",
    )
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )

    args = parser.parse_args()

    config = build_config(args)
    errors = config.validate()
    if errors:
        for error in errors:
            print(f"config error: {error}", file=sys.stderr)
        sys.exit(2)
    set_config(config)

    from pitchside.service import LayoutController
    from pitchside.sources import source_from_string

    controller = LayoutController(config)
    source_value = args.source or config.source_url
    source = source_from_string(source_value, timeout=config.fetch_timeout) if source_value else None

    if args.dump or args.api:
        logging.basicConfig(
            level=args.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        from textual.logging import TextualHandler

        logging.basicConfig(level=args.log_level, handlers=[TextualHandler()])

    if args.dump:
        if source is not None:
            asyncio.run(controller.load(source))
        dump_layout(controller)
        return

    if args.api:
        from pitchside.api.main import run_api
        from pitchside.api.services.layout_service import layout_service

        layout_service.bind(controller)
        if source is not None:
            asyncio.run(controller.load(source))
        run_api(host=args.host, port=args.port)
        return

    from pitchside.ui.app import run_app

    run_app(controller=controller, source=source)


if __name__ == "__main__":
    main()
