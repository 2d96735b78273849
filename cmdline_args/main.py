"""Top-level code of the ‘python -m cmdline_args’ tool.

The main() function is called by the package entrypoint code in __main__.py.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import json
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from .classifier import CommandLine
from .cmdline_parser import CmdArgs, LogLevelT, parse_command_line
from .config.schema import ClassifierConfig, ConfigError, bool_var, load_config_file
from .error import CommandLineError

_LOGGER = logging.getLogger(__name__)


def _configure_logging(log_level: LogLevelT):
    from logging import _nameToLevel  # pylint: disable=protected-access

    level = logging.DEBUG if bool_var("DEBUG") else _nameToLevel[log_level.upper()]
    logging.basicConfig(
        stream=sys.stderr,
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        level=level,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load_config(args: CmdArgs) -> ClassifierConfig:
    if args.config_file:
        _LOGGER.debug("Loading configuration file '%s'", args.config_file)
        return load_config_file(args.config_file)
    return ClassifierConfig()


def classify(args: CmdArgs, script: str, out: TextIO | None = None) -> CommandLine:
    """Classify the tokens selected on the command line and print them as JSON."""
    if out is None:
        out = sys.stdout
    config = _load_config(args)
    cmd = CommandLine.from_config(args.tokens, config, script=script)
    result = {
        "script": cmd.script(),
        "options": dict(cmd.options()),
        "params": list(cmd.params()),
    }
    json.dump(result, out, indent=2)
    out.write("\n")
    return cmd


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv
    args = parse_command_line(argv[1:])
    _configure_logging(args.log_level)

    exit_code = 0
    try:
        classify(args, script=argv[0] if argv else "")

    except (CommandLineError, ConfigError, FileNotFoundError) as e:
        exit_code = 1
        _LOGGER.error("%s: %s", type(e).__name__, e)

    except Exception:  # pylint: disable=broad-exception-caught
        exit_code = 1
        from traceback import format_exc

        _LOGGER.error("Exiting with exception:\n%s", format_exc())

    return exit_code
