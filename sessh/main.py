#!/usr/bin/env python
# sessh - pick a remote host and connect over ssh
# License: MIT

import sys
from typing import Dict, List

# ---------------------------------------------------------------------------
# COMMANDS_REGISTRY - every CLI command with its description.
# usage / help_text are generated from this registry.
# ---------------------------------------------------------------------------

COMMANDS_REGISTRY: List[Dict] = [
    {"command": "list", "args": "", "description": "List stored sessions and known hosts"},
    {"command": "rm", "args": "<n>", "description": "Remove stored session number n"},
    {"command": "config", "args": "show|get|set|path", "description": "Configuration and settings"},
    {"command": "help", "args": "", "description": "Show help"},
    {"command": "version", "args": "", "description": "Show version"},
]

config_usage = '''[subcommand] [args...]

Subcommands:
  show              - Show configuration
  get <key>         - Get config value (e.g. paths.history_file)
  set <key> <value> - Set config value
  path              - Show config file and resolved host sources
'''


def _generate_usage() -> str:
    """Generate the short usage string from COMMANDS_REGISTRY."""
    lines = ["[command] [args...]", "", "Run without a command to pick a host interactively.", "", "Commands:"]
    for entry in COMMANDS_REGISTRY:
        left = f"{entry['command']} {entry['args']}".strip()
        lines.append(f"  {left:<24s}- {entry['description']}")
    lines.append("")
    return "\n".join(lines)


def _generate_help_text() -> str:
    """Generate the full help text from COMMANDS_REGISTRY."""
    lines = [
        "",
        "sessh: pick a remote host and connect over ssh.",
        "",
        "INTERACTIVE INPUT",
        "  <n>              Connect to entry n",
        "  -<n>             Remove stored session n",
        "  user@host        Connect to a new target and remember it",
        "  (empty)          Also list hosts from known_hosts, then choose",
        "  0                Quit",
        "",
        "COMMANDS",
    ]
    for entry in COMMANDS_REGISTRY:
        left = f"  sessh {entry['command']} {entry['args']}".rstrip()
        lines.append(f"{left:<32s}{entry['description']}")
    lines.extend([
        "",
        "CONFIG FILES",
        "  ~/.config/sessh/",
        "  ├── config.yaml         Settings (paths, ssh, log)",
        "  └── logs/               Daily JSONL event logs",
        "",
    ])
    return "\n".join(lines)


usage = _generate_usage()

help_text = _generate_help_text()


def _startup_menu(sessions: List[str], paths) -> None:
    from .core.candidates import display_sessions

    print(f"List stored sessions from '{paths.history_file}': ")
    display_sessions(sessions)
    print("-----------------------------------------")
    print("1) Enter number to open stored session;")
    print("2) Enter 'username@host' to open new session;")
    print(f"3) Enter nothing to list hosts from '{paths.known_hosts}';")
    print("4) Enter -number to remove a stored session, 0 to quit;")


def _open(config):
    """Build store, known hosts loader and logger from config."""
    from .config import lookup, resolve_paths
    from .core.event_log import open_logger
    from .core.host_list import read_host_list
    from .core.session_store import SessionStore

    paths = resolve_paths(config)
    store = SessionStore(paths.history_file)
    logger = open_logger(bool(lookup(config, "log.enabled", True)))
    return paths, store, (lambda: read_host_list(paths.known_hosts)), logger


def cmd_connect(args: List[str]) -> int:
    """Pick a host interactively and connect to it."""
    from .cli_utils import print_error
    from .config import load_config, lookup
    from .core.candidates import printable
    from .core.errors import Abort, OutOfRange, ParseFailure
    from .core.interpreter import DELETE, InputInterpreter
    from .services.ssh import SSHLauncher

    config = load_config()
    paths, store, load_trusted, logger = _open(config)

    with logger:
        sessions = store.load()
        _startup_menu(sessions, paths)

        interpreter = InputInterpreter(store, load_trusted, logger=logger)
        try:
            resolution = interpreter.run(sessions)
        except Abort as e:
            logger.write("aborted", reason=e.reason)
            print("Bye.")
            return 0
        except (OutOfRange, ParseFailure) as e:
            logger.write("error", message=str(e))
            print_error(str(e))
            return 1

        if resolution.action == DELETE:
            print(f"Removed session: {printable(resolution.entry)}")
            return 0

        launcher = SSHLauncher(
            binary=str(lookup(config, "ssh.binary", "ssh")),
            extra_args=[str(a) for a in lookup(config, "ssh.extra_args", []) or []],
            store=store,
            remember_username=bool(lookup(config, "ssh.remember_username", True)),
            logger=logger,
        )
        return launcher.launch(resolution.target)


def cmd_list(args: List[str]) -> int:
    """List sessions and known hosts in one numbering."""
    from .config import load_config
    from .core.candidates import display

    paths, store, load_trusted, logger = _open(load_config())
    with logger:
        sessions = store.load()
        trusted = load_trusted()
    if not sessions and not trusted:
        print("No stored sessions or known hosts.")
        return 0
    display(sessions, trusted)
    return 0


def cmd_rm(args: List[str]) -> int:
    """Remove a stored session by number."""
    from .cli_utils import print_error
    from .config import load_config
    from .core.candidates import printable
    from .core.errors import OutOfRange, ParseFailure
    from .core.interpreter import parse_index

    if len(args) != 1:
        print("Usage: sessh rm <n>")
        return 1

    paths, store, _, logger = _open(load_config())
    with logger:
        try:
            position = parse_index(args[0].lstrip("-"))
            removed, _ = store.remove(store.load(), position)
        except (OutOfRange, ParseFailure) as e:
            print_error(str(e))
            return 1
        logger.write("session_removed", entry=removed, position=position)
    print(f"Removed session: {printable(removed)}")
    return 0


def cmd_config(args: List[str]) -> int:
    """Show or change configuration."""
    import yaml
    from . import constants
    from .config import (
        get_config_value,
        load_config,
        parse_value,
        resolve_paths,
        set_config_value,
    )

    if not args or args[0] in ("-h", "--help", "help"):
        print(config_usage)
        return 0

    subcommand = args[0]
    if subcommand == "show":
        print(yaml.dump(load_config(), default_flow_style=False, sort_keys=False), end="")
    elif subcommand == "get" and len(args) == 2:
        value = get_config_value(args[1])
        if value is None:
            print(f"Not set: {args[1]}")
            return 1
        if isinstance(value, (dict, list)):
            print(yaml.dump(value, default_flow_style=False, sort_keys=False), end="")
        else:
            print(value)
    elif subcommand == "set" and len(args) == 3:
        set_config_value(args[1], parse_value(args[2]))
        print(f"Set {args[1]} = {args[2]}")
    elif subcommand == "path":
        paths = resolve_paths(load_config())
        print(f"config:       {constants.CONFIG_FILE}")
        print(f"history_file: {paths.history_file}")
        print(f"known_hosts:  {paths.known_hosts}")
    else:
        print(f"Unknown config command: {' '.join(args)}")
        print(config_usage)
        return 1
    return 0


def main(args: List[str]) -> int:
    """Main entry point for sessh; returns the exit status."""
    from .cli_utils import print_error
    from .core.errors import LaunchError, SesshError

    commands = {
        "list": cmd_list,
        "rm": cmd_rm,
        "config": cmd_config,
    }

    try:
        if len(args) < 2:
            return cmd_connect([])

        command = args[1]
        cmd_args = args[2:]

        if command in commands:
            return commands[command](cmd_args)
        if command in ("help", "-h", "--help"):
            print(help_text)
            return 0
        if command in ("version", "--version"):
            from . import __version__
            print(f"sessh {__version__}")
            return 0

        print(f"Unknown command: {command}")
        print(usage)
        return 1
    except LaunchError as e:
        print_error(str(e))
        return 127
    except SesshError as e:
        print_error(str(e))
        return 1
    except OSError as e:
        print_error(f"{e.strerror or e}: {e.filename}" if e.filename else str(e))
        return 1


def cli() -> None:
    """CLI entry point (called by the installed sessh command)."""
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
