"""Command-line entry point for nsconf."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from .config import AppConfig, load_config
from .controller import NameServiceController, configure_logging, matching_hosts
from .exporter import config_to_dict, hosts_to_dict, to_json, to_yaml
from .models import NsconfError


def _build_parser() -> argparse.ArgumentParser:
    """Create the CLI parser."""
    parser = argparse.ArgumentParser(description="Inspect resolv.conf and hosts files.")
    parser.add_argument("--log-level", help="Override log level (default from config).")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on lines that are not valid UTF-8 instead of skipping them.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    resolv_parser = subparsers.add_parser("resolv", help="Show the parsed resolver configuration.")
    resolv_parser.add_argument("--path", help="resolv.conf path (default from config).")
    _register_format_argument(resolv_parser)

    hosts_parser = subparsers.add_parser("hosts", help="Show the parsed hosts entries.")
    hosts_parser.add_argument("--path", help="hosts file path (default from config).")
    hosts_parser.add_argument("--name", help="Only show entries carrying this name.")
    _register_format_argument(hosts_parser)

    lookup_parser = subparsers.add_parser("lookup", help="Print the addresses mapped to a name.")
    lookup_parser.add_argument("name", help="Host name to look up.")
    lookup_parser.add_argument("--path", help="hosts file path (default from config).")

    return parser


def _register_format_argument(subparser: argparse.ArgumentParser) -> None:
    """Register the output format argument."""
    subparser.add_argument(
        "--format",
        choices=["yaml", "json"],
        default="yaml",
        help="Serialization format for the output.",
    )


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Apply command-line overrides to the loaded configuration."""
    if args.strict:
        config = replace(config, strict=True)
    path = getattr(args, "path", None)
    if path and args.command == "resolv":
        config = replace(config, resolv_conf_path=Path(path))
    elif path:
        config = replace(config, hosts_path=Path(path))
    return config


def _render(data: dict, fmt: str) -> str:
    """Serialize exported data in the requested format."""
    if fmt == "json":
        return to_json(data)
    return to_yaml(data).rstrip("\n")


def _run_resolv(controller: NameServiceController, args: argparse.Namespace) -> int:
    """Execute the resolv command."""
    config = controller.resolver()
    print(_render(config_to_dict(config), args.format))
    return 0


def _run_hosts(controller: NameServiceController, args: argparse.Namespace) -> int:
    """Execute the hosts command."""
    hosts = controller.hosts()
    if args.name:
        hosts = matching_hosts(hosts, args.name)
    print(_render(hosts_to_dict(hosts), args.format))
    return 0


def _run_lookup(controller: NameServiceController, args: argparse.Namespace) -> int:
    """Execute the lookup command."""
    addresses = controller.lookup(args.name)
    if not addresses:
        print(f"{args.name}: not found", file=sys.stderr)
        return 1
    for address in addresses:
        print(address)
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        config = _apply_overrides(load_config(), args)
        configure_logging(args.log_level or config.log_level)
        controller = NameServiceController(config)
        if args.command == "resolv":
            status = _run_resolv(controller, args)
        elif args.command == "hosts":
            status = _run_hosts(controller, args)
        elif args.command == "lookup":
            status = _run_lookup(controller, args)
        else:  # pragma: no cover - argparse ensures we never reach here
            parser.error(f"Unsupported command {args.command}")
    except NsconfError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except Exception as exc:  # noqa: BLE001
        print(f"Unexpected error: {exc}", file=sys.stderr)
        sys.exit(3)
    sys.exit(status)


if __name__ == "__main__":
    main()
