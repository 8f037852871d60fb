"""Command-line interface for stopgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import yaml

from stopgraph.errors import StopGraphError
from stopgraph.io import StopNetwork, load_network_file
from stopgraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from stopgraph.networks import build_usm_network
from stopgraph.paths import find_all_paths
from stopgraph.report import format_matrix, format_path_listing, paths_to_dict

logger = get_logger(__name__)

WELCOME = "Welcome to the USM Bus Stop Route Finder!"
FAREWELL = (
    "Thank you for using the USM Bus Stop Route Finder! Wishing you a safe journey"
)
MENU = (
    "\t\t\t-----Main Menu-----\n"
    "\t\t\t1. Display Whole Map Route\n"
    "\t\t\t2. Find Route\n"
    "\t\t\t3. Exit\n"
)


def _load_network(path: Optional[Path]) -> StopNetwork:
    if path is None:
        logger.debug("Using built-in USM network")
        return build_usm_network()
    return load_network_file(path)


def _show_matrix(network: StopNetwork, width: Optional[int] = None) -> None:
    print(format_matrix(network.graph, width=width))


def _show_paths(
    network: StopNetwork, source: str, target: str, as_json: bool = False
) -> None:
    src = network.index_of(source)
    dst = network.index_of(target)
    paths = find_all_paths(network.graph, src, dst)
    logger.info("Found %d path(s) between stop %d and stop %d", len(paths), src, dst)
    if as_json:
        print(json.dumps(paths_to_dict(network.graph, src, dst, paths), indent=2))
    else:
        print(format_path_listing(network.graph, src, dst, paths))


def _read_int(prompt: str, stdin: TextIO) -> Optional[int]:
    """Prompt until an integer is read. Returns None at end of input."""
    while True:
        print(prompt)
        line = stdin.readline()
        if not line:
            return None
        try:
            return int(line.strip())
        except ValueError:
            print(f"Please enter a whole number, got '{line.strip()}'.")


def _run_menu(network: StopNetwork, stdin: Optional[TextIO] = None) -> None:
    """Interactive loop: show the matrix, find routes, or exit."""
    stdin = stdin if stdin is not None else sys.stdin
    print(f"\n\t\t{WELCOME}\n")

    while True:
        print(MENU)
        choice = _read_int("Enter your choice: ", stdin)
        if choice == 1:
            _show_matrix(network)
        elif choice == 2:
            source = _read_int("Enter the initial destination: ", stdin)
            if source is None:
                break
            target = _read_int("Enter the final destination: ", stdin)
            if target is None:
                break
            try:
                _show_paths(network, str(source), str(target))
            except StopGraphError as exc:
                print(f"Invalid bus stop: {exc}")
        else:
            break
        print("\n\n")

    print(FAREWELL)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``stopgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="stopgraph",
        description="Explore routes between bus stops.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--network",
        "-n",
        type=Path,
        default=None,
        help="Network YAML file (default: built-in USM campus network)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{matrix,paths,menu}",
        help="Available commands",
    )

    matrix_parser = subparsers.add_parser("matrix", help="Print the distance matrix")
    matrix_parser.add_argument(
        "--width", "-w", type=int, default=None, help="Column width"
    )

    paths_parser = subparsers.add_parser(
        "paths", help="List every simple path between two stops"
    )
    paths_parser.add_argument("source", help="Starting stop (index or name)")
    paths_parser.add_argument("target", help="Destination stop (index or name)")
    paths_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON (log messages below WARNING are suppressed)",
    )

    subparsers.add_parser("menu", help="Start the interactive route finder")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    # Logs share stdout, so JSON output must not be interleaved with them
    json_output = getattr(args, "json", False)
    if args.verbose and not json_output:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet or json_output:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    try:
        network = _load_network(args.network)
        if args.command == "matrix":
            _show_matrix(network, args.width)
        elif args.command == "paths":
            _show_paths(network, args.source, args.target, as_json=args.json)
        elif args.command == "menu":
            _run_menu(network)
    except FileNotFoundError as exc:
        logger.error("Network file not found: %s", exc.filename)
        raise SystemExit(1) from exc
    except yaml.YAMLError as exc:
        logger.error("Network file is not valid YAML: %s", exc)
        raise SystemExit(1) from exc
    except StopGraphError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
