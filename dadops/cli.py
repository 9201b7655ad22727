"""Command line entry point: jokes, URL checks and the web server."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import yaml

from dadops.database import setup_db
from dadops.jokes import JOKE_URL, get_random_joke, verify_url
from dadops.server import serve

CONFIG_NAME = ".Devops"
CONFIG_EXTENSIONS = (".json", ".yaml", ".yml")


def _find_home_config():
    home = Path.home()
    for extension in CONFIG_EXTENSIONS:
        candidate = home / f"{CONFIG_NAME}{extension}"
        if candidate.is_file():
            return candidate
    return None


def load_config(path=None):
    """Read the config file; return ``(path, values)`` or ``(None, {})`` if none was read.

    Without ``path`` the home directory is searched for ``.Devops`` with a
    JSON or YAML extension. Environment variables named after a key in upper
    case override that key's value.
    """
    candidate = Path(path) if path else _find_home_config()
    if candidate is None:
        return None, {}
    try:
        with candidate.open(encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError):
        return None, {}
    values = dict(data) if isinstance(data, dict) else {}
    for key in list(values):
        if isinstance(key, str):
            override = os.environ.get(key.upper())
            if override is not None:
                values[key] = override
    return candidate, values


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def _build_parser():
    parser = _Parser(
        prog="dadops",
        description="dadjoke cli , just to practise this",
    )
    parser.add_argument(
        "--config", default="", help="config file (default is $HOME/.Devops.yaml)"
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    commands = parser.add_subparsers(dest="command", metavar="command")
    commands.add_parser("random", help="Print a random dad joke")
    commands.add_parser("verify", help="To verify the source URL for random joke")
    commands.add_parser("serve", help="Run the web server on port 8080")
    return parser


def _run_random():
    get_random_joke()


def _run_verify():
    verify_url(JOKE_URL)
    setup_db()


def _run_serve():
    serve()


_COMMANDS = {"random": _run_random, "verify": _run_verify, "serve": _run_serve}


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    config_path, _ = load_config(args.config or None)
    if config_path is not None:
        print("Using config file:", config_path)
    _COMMANDS[args.command]()
    return 0