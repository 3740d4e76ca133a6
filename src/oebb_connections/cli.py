"""Command-line interface for upcoming ÖBB connections."""

import argparse
import asyncio
import sys
from typing import Any

import aiohttp
from pydantic import TypeAdapter

from oebb_connections.adapters.config import AppConfig, RouteConfigurationLoader
from oebb_connections.adapters.display import ConnectionFormatter
from oebb_connections.adapters.refresh_poller import RefreshPoller
from oebb_connections.domain.models import RefreshResult, TransportCatalog
from oebb_connections.main import build_request, configure_logging, create_refresh_service

_RESULT_ADAPTER = TypeAdapter(RefreshResult)


def result_to_json(result: RefreshResult) -> str:
    """Serialize a refresh result as indented JSON."""
    return _RESULT_ADAPTER.dump_json(result, indent=2).decode()


def _handle_routes_command(catalog: TransportCatalog) -> None:
    """Handle the routes command."""
    print(f"\nConfigured routes ({len(catalog.routes)}):\n")
    for route in catalog.routes.values():
        print(f"  {route.key}: {route.label}")
        print(
            f"    {route.origin.name} ({route.origin.id}) -> "
            f"{route.destination.name} ({route.destination.id})"
        )
        if route.correlations:
            names = ", ".join(station.name for station in route.correlations)
            print(f"    Arrival times also shown for: {names}")
    products = ", ".join(sorted(p.value for p in catalog.admissible_products))
    print(f"\nAdmissible products: {products}")


async def _handle_show_command(
    config: AppConfig,
    catalog: TransportCatalog,
    route_key: str | None,
    limit: int | None,
    output_json: bool,
) -> None:
    """Handle the show command: one refresh, printed once."""
    request = build_request(config, catalog, route_key, limit)
    route = catalog.route(request.route_key)

    async with aiohttp.ClientSession() as session:
        result = await create_refresh_service(config, session).run_refresh(request)

    if output_json:
        print(result_to_json(result))
    else:
        print(ConnectionFormatter(config.timezone).render(route.label, result))


async def _handle_watch_command(
    config: AppConfig,
    catalog: TransportCatalog,
    route_key: str | None,
    limit: int | None,
) -> None:
    """Handle the watch command: refresh periodically until interrupted."""
    request = build_request(config, catalog, route_key, limit)
    route = catalog.route(request.route_key)
    formatter = ConnectionFormatter(config.timezone)

    def _print_result(result: RefreshResult) -> None:
        print(formatter.render(route.label, result), end="\n\n", flush=True)

    async with aiohttp.ClientSession() as session:
        poller = RefreshPoller(
            create_refresh_service(config, session),
            request,
            on_result=_print_result,
            interval_seconds=config.refresh_interval_seconds,
            cooldown_seconds=config.refresh_cooldown_seconds,
        )
        await poller.start()
        try:
            await poller.wait()
        finally:
            await poller.stop()


def _setup_argparse() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Upcoming ÖBB S-Bahn and REX connections between Vienna stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List configured routes
  oebb-connections routes

  # Show the next connections for the default route
  oebb-connections show

  # Show Wien Mitte -> Floridsdorf as JSON
  oebb-connections show m-f --json

  # Refresh every REFRESH_INTERVAL_SECONDS until Ctrl-C
  oebb-connections watch f-m
        """,
    )
    parser.add_argument("--config", help="Path to TOML configuration file")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("routes", help="List configured routes")

    show_parser = subparsers.add_parser("show", help="Show upcoming connections once")
    show_parser.add_argument("route", nargs="?", help="Route key (e.g., f-m)")
    show_parser.add_argument("--limit", type=int, help="Maximum number of connections")
    show_parser.add_argument("--json", action="store_true", help="Output as JSON")

    watch_parser = subparsers.add_parser("watch", help="Refresh connections periodically")
    watch_parser.add_argument("route", nargs="?", help="Route key (e.g., f-m)")
    watch_parser.add_argument("--limit", type=int, help="Maximum number of connections")

    return parser


def _load_config(args: Any) -> tuple[AppConfig, TransportCatalog]:
    """Load configuration and the transport catalog."""
    config = AppConfig(config_file=args.config) if args.config else AppConfig()
    catalog = RouteConfigurationLoader.load(config)
    return config, catalog


async def _execute_command(args: Any, config: AppConfig, catalog: TransportCatalog) -> None:
    """Execute the appropriate command based on args."""
    if args.command == "routes":
        _handle_routes_command(catalog)
    elif args.command == "show":
        await _handle_show_command(config, catalog, args.route, args.limit, args.json)
    elif args.command == "watch":
        await _handle_watch_command(config, catalog, args.route, args.limit)


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config, catalog = _load_config(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config.log_level)

    try:
        await _execute_command(args, config, catalog)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
