"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import logging
import sys

from weather_widget import __version__
from weather_widget.config import get_settings
from weather_widget.flows.build import build_widget
from weather_widget.renderers.summary import build_text_summary
from weather_widget.schemas import DataMode, UnitSystem
from weather_widget.session import SelectCity, WidgetContext, WidgetSession


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-widget",
        description="Current weather and 7-day forecast from mock or Open-Meteo data",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'show' command - print the widget as text
    show_parser = subparsers.add_parser("show", help="Print current weather and forecast")
    show_parser.add_argument("--city", type=str, default=None, help="City name")
    show_parser.add_argument(
        "--mode",
        type=DataMode,
        choices=list(DataMode),
        default=None,
        help="Data source (default: data_source from settings)",
    )
    show_parser.add_argument(
        "--unit",
        type=UnitSystem,
        choices=list(UnitSystem),
        default=None,
        help="Temperature unit (default: unit from settings)",
    )

    # 'build' command - render site/index.html
    build_parser = subparsers.add_parser("build", help="Build the widget page")
    build_parser.add_argument("--city", type=str, default=None, help="City name")

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def configure_logging(debug: bool) -> None:
    """Send library log records to stderr."""
    level = "DEBUG" if debug else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data source: {settings.data_source}")
    print(f"Unit: {settings.unit}")
    print(f"Default location: {settings.default_city}, {settings.default_country}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the 'show' command."""
    settings = get_settings()
    mode = args.mode or settings.data_source
    unit = args.unit or settings.unit

    session = WidgetSession.from_settings(settings)
    context = session.start(WidgetContext(mode=mode, unit=unit))
    if args.city is not None and args.city != context.city:
        if mode is DataMode.MOCK and args.city not in context.cities():
            print(f"Error: {args.city!r} is not a mock city", file=sys.stderr)
            return 1
        context = session.handle(context, SelectCity(args.city))

    if context.error:
        print(f"Error: {context.error}", file=sys.stderr)
        return 1

    print(build_text_summary(context))
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command."""
    result = build_widget(city=args.city)
    return 0 if result["has_report"] else 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = settings.site_dir

    if not site_dir.exists():
        print("No site directory found. Run 'weather-widget build' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(getattr(args, "debug", False))

    commands = {
        "info": cmd_info,
        "show": cmd_show,
        "build": cmd_build,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
