"""Main entry point for the Client Search command line tool."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from client_search import __version__
from client_search.config.environment import EnvironmentConfig
from client_search.config.exceptions import ConfigurationError
from client_search.config.loader import load_config
from client_search.config.models import AppConfig, OutputFormat
from client_search.logging import get_logger
from client_search.logging.config import configure_logging
from client_search.output import render_duplicates, render_records
from client_search.search.service import ClientSearch
from client_search.sources.exceptions import SourceError
from client_search.sources.factory import get_source

logger = get_logger(__name__, component="cli")

FORMAT_CHOICES = [fmt.value for fmt in OutputFormat]
LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def load_runtime_config(
    config_path: Optional[Path],
    log_level_override: Optional[str] = None,
    file_override: Optional[str] = None,
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load and prepare runtime configuration.

    Args:
        config_path: Path to configuration file (None to use default lookup)
        log_level_override: Log level from CLI (takes precedence)
        file_override: Data file from CLI (takes precedence over config and env)

    Returns:
        Tuple of (AppConfig, EnvironmentConfig)

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if file_override:
        app_config.source = app_config.source.model_copy(update={"file": file_override})

    # Log level priority: CLI > Environment > Config
    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    return app_config, env_config


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got: {value}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="client-search",
        description="Client Search - find client records and duplicate email addresses",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: client_search.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVEL_CHOICES,
        help="Log level (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Search for clients")
    search_parser.add_argument("query", help="Text to search for")
    search_parser.add_argument(
        "--field", default=None, help="Field to search (default: full_name)"
    )
    search_parser.add_argument(
        "--format", dest="output_format", default=None, choices=FORMAT_CHOICES,
        help="Output format (default: table)",
    )
    search_parser.add_argument(
        "--limit", type=_positive_int, default=None, help="Maximum number of results to return"
    )
    search_parser.add_argument(
        "--exact", action="store_true", help="Require an exact match on the whole field"
    )
    search_parser.add_argument("--file", default=None, help="Path to a JSON file to search")

    duplicates_parser = subparsers.add_parser(
        "duplicates", help="Find clients with duplicate email addresses"
    )
    duplicates_parser.add_argument(
        "--format", dest="output_format", default=None, choices=FORMAT_CHOICES,
        help="Output format (default: table)",
    )
    duplicates_parser.add_argument("--file", default=None, help="Path to a JSON file to search")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP query API")
    serve_parser.add_argument("--host", default=None, help="Interface to bind")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to listen on")
    serve_parser.add_argument("--file", default=None, help="Path to a JSON file to serve")

    subparsers.add_parser("version", help="Display the version of client-search")

    return parser


def run_search(args: argparse.Namespace, app_config: AppConfig, errors: List[SourceError]) -> str:
    service = ClientSearch(get_source(app_config.source), on_source_error=errors.append)
    records = service.search(
        args.query,
        args.field or app_config.search.default_field,
        limit=args.limit or app_config.search.limit,
        exact=args.exact,
    )
    return render_records(records, args.output_format or app_config.search.default_format)


def run_duplicates(
    args: argparse.Namespace, app_config: AppConfig, errors: List[SourceError]
) -> str:
    service = ClientSearch(get_source(app_config.source), on_source_error=errors.append)
    duplicate_groups = service.find_duplicate_emails()
    return render_duplicates(
        duplicate_groups, args.output_format or app_config.search.default_format
    )


def run_server(args: argparse.Namespace, app_config: AppConfig) -> None:
    import uvicorn

    from client_search.api.server import create_app

    host = args.host or app_config.server.host
    port = args.port or app_config.server.port

    logger.info(
        "Starting API server",
        extra={"event": "service.api.starting", "host": host, "port": port},
    )
    uvicorn.run(create_app(get_source(app_config.source)), host=host, port=port)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for Client Search.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        print(f"client-search version {__version__}")
        return 0

    try:
        app_config, env_config = load_runtime_config(
            args.config, args.log_level, getattr(args, "file", None)
        )

        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        logger.debug(
            "Configuration loaded",
            extra={
                "event": "config.loaded",
                "command": args.command,
                "source": "file" if app_config.source.file else "http",
                "log_level": env_config.log_level,
            },
        )

        if args.command == "serve":
            run_server(args, app_config)
            return 0

        errors: List[SourceError] = []
        if args.command == "search":
            output = run_search(args, app_config, errors)
        else:
            output = run_duplicates(args, app_config, errors)

        if errors:
            print(f"Error: {errors[0]}", file=sys.stderr)
            return 1

        print(output)
        return 0

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1
    except SourceError as e:
        # Source construction failures (bad timeout, empty URL, ...)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
