#!/usr/bin/env python3
"""
ACode - Workspace Console

This is the main entry point for ACode. It opens an empty workspace and
runs its command console interactively.

Author: YSNRFD
Version: 1.0.0
"""

import argparse
import json
import sys
from typing import Any, List, Optional

from acode.core.config_loader import ConfigLoader
from acode.core.session import IDESession
from acode.exceptions import ConfigException, ConfigValidationError
from acode.logger import LogLevel, Logger
from acode.shell import LogType, TerminalEntry


EXIT_COMMANDS = ('exit', 'quit')


def _render(entry: TerminalEntry, use_colors: bool) -> str:
    line = f"> {entry.message}"
    if not use_colors or entry.type == LogType.INFO:
        return line
    color = '\033[31m' if entry.type == LogType.ERROR else '\033[32m'
    return f"{color}{line}\033[0m"


def _coerce(raw: str, current: Any) -> Any:
    """Convert a command line override to the type of the value it replaces."""
    if isinstance(current, bool):
        lowered = raw.lower()
        if lowered in ('1', 'true', 'yes', 'on'):
            return True
        if lowered in ('0', 'false', 'no', 'off'):
            return False
        raise ValueError(f"expected a boolean, got '{raw}'")
    if isinstance(current, int):
        return int(raw)
    if current is None and raw.lower() in ('', 'none', 'null'):
        return None
    return raw


def apply_overrides(loader: ConfigLoader, overrides: List[str]) -> None:
    """
    Apply ``KEY=VALUE`` overrides on top of the loaded configuration.

    Raises:
        ConfigValidationError: If an override is malformed, names an
            unknown key or fails validation
    """
    for item in overrides:
        key, sep, raw = item.partition('=')
        key = key.strip()
        if not sep or not key:
            raise ConfigValidationError(f"Override must look like KEY=VALUE: {item}")

        missing = object()
        current = loader.get(key, missing)
        if key.count('.') != 1 or current is missing or hasattr(current, '__dataclass_fields__'):
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        try:
            value = _coerce(raw, current)
        except ValueError as e:
            raise ConfigValidationError(f"{key}: {e}", key=key) from e
        loader.set(key, value)


def run_repl(session: IDESession, welcome_message: str) -> None:
    """
    Read command lines until ``exit`` or end of input.

    Terminal entries added by each command are printed after it runs.
    """
    console = session.console
    terminal = session.terminal
    use_colors = sys.stdout.isatty()

    print(f"\n{session.store.root.name}")
    print(f"{welcome_message}\n")

    while True:
        try:
            line = input(console.prompt)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("^C")
            continue

        if line.strip().lower() in EXIT_COMMANDS:
            break

        # 'clear' empties the log, leaving nothing new to print
        before = len(terminal)
        console.execute(line)
        start = before if len(terminal) >= before else len(terminal)
        for entry in terminal.since(start):
            print(_render(entry, use_colors))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for ACode.

    Startup sequence:
    1. Load configuration and apply overrides
    2. Initialize logging
    3. Open a workspace session
    4. Run the console
    5. Shutdown
    """
    parser = argparse.ArgumentParser(prog='acode', description='ACode workspace console')
    parser.add_argument('-c', '--config', help='path to a JSON configuration file')
    parser.add_argument(
        '-s', '--set', action='append', default=[], metavar='KEY=VALUE',
        help='override a configuration value, e.g. shell.prompt="> "',
    )
    parser.add_argument(
        '--show-config', action='store_true',
        help='print the effective configuration as JSON and exit',
    )
    args = parser.parse_args(argv)

    loader = ConfigLoader()
    try:
        if args.config:
            loader.load(args.config)
        apply_overrides(loader, args.set)
    except ConfigException as e:
        print(f"acode: {e}", file=sys.stderr)
        return 1

    if args.show_config:
        print(json.dumps(loader.to_dict(), indent=2))
        return 0

    config = loader.config
    Logger.initialize(
        level=LogLevel.from_name(config.logging.level),
        log_file=config.logging.log_file,
        console_output=config.logging.console_output,
    )

    session = IDESession(config)
    try:
        run_repl(session, config.shell.welcome_message)
    except KeyboardInterrupt:
        print("\n\nInterrupted")
    finally:
        Logger.shutdown()

    return 0


if __name__ == '__main__':
    sys.exit(main())
