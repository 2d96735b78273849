"""Command-line argument parser of the ‘python -m cmdline_args’ tool.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import argparse
import textwrap
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

type LogLevelT = Literal["debug", "info", "warn", "error", "critical"]


@dataclass
class CmdArgs:
    config_file: str | None
    log_level: LogLevelT
    tokens: list[str]


def get_package_name() -> str:
    from os.path import abspath, basename, dirname

    return basename(dirname(abspath(__file__)))


def parse_command_line(argv: Sequence[str] | None = None) -> CmdArgs:
    parser = argparse.ArgumentParser(
        prog=get_package_name(),
        description=textwrap.dedent(
            """\
            Classify TOKENs into options and params and print the result as
            JSON. Use ‘--’ to separate the TOKENs from this tool's own options,
            e.g. ‘%(prog)s -c args.toml -- --verbose input.txt’.
            """
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--config-file",
        default=None,
        help="TOML configuration file path ([classifier] table)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warn", "error", "critical"],
        default="warn",
        help=textwrap.dedent(
            """\
            Set the logging level. The default is ‘warn’. Debug logging is
            also turned on by setting the ‘DEBUG’ environment variable to
            a value other than ‘0’, ‘no’, ‘false’ or ‘off’.
            """
        ),
    )
    parser.add_argument(
        "tokens",
        metavar="TOKEN",
        nargs="*",
        help="Command line tokens to classify",
    )
    args = CmdArgs(**vars(parser.parse_args(argv)))

    return args
