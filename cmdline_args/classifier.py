"""Command line classifier: split the raw arguments into options and params.

The arguments are read from left to right:
- DASH-ed (‘--’) arguments are options, kept as a name to value mapping.
- The first argument that is not DASH-ed is a param, and so are all
  subsequent arguments, DASH-ed or not.
- A DASHES-only argument (‘--’) is a break between options and params. It is
  itself recorded as an option named ‘--’.
- Options have the format ‘--NAME’, ‘--NAME=’ or ‘--NAME=VALUE’. Short options
  ‘-N’ and ‘-N=VALUE’ are rewritten to the long format before matching.
- Malformed or not allowed options are either ignored or cause an exception
  to be raised, as selected by the ‘strict’ constructor argument.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Collection, Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Literal

from .error import (
    DisallowedOptionError,
    InvalidArgumentError,
    InvalidIndexError,
    NonexistentOptionError,
    NonexistentParamError,
)
from .grammar import DASHES, match_long_option, rewrite_short_option

if TYPE_CHECKING:
    from .config.schema import ClassifierConfig

_LOGGER = logging.getLogger(__name__)

# True for ‘--NAME’ (option present, no value), a string for ‘--NAME=VALUE’.
type OptionValue = Literal[True] | str


class CommandLine:
    def __init__(
        self,
        raw_arguments: Sequence[str],
        strict: bool = False,
        allowed_options: Collection[str] | None = None,
        short_option_map: Mapping[str, str] | None = None,
        script: str = "",
    ):
        """Classify ‘raw_arguments’ into options and params.

        Args:
            raw_arguments: Command line arguments, excluding the script name.
            strict: Raise exceptions instead of ignoring malformed arguments
              and not allowed options.
            allowed_options: If not None, options not included in it are
              ignored (or raise DisallowedOptionError if ‘strict’ is True).
              An empty collection allows no options.
            short_option_map: Short name to long name map, e.g. {"v": "verbose"}.
            script: The script (invocation) name.

        Raises:
            InvalidArgumentError: If ‘strict’ and an option is malformed.
            DisallowedOptionError: If ‘strict’ and an option is not allowed.
        """
        self._script = script
        arguments = tuple(raw_arguments)
        allowed = None if allowed_options is None else frozenset(allowed_options)
        short_map = short_option_map or {}

        options: dict[str, OptionValue] = {}
        # Number of arguments consumed by the options region
        dashed_count = 0
        for raw_argument in arguments:
            argument = rewrite_short_option(raw_argument, short_map)
            if not argument.startswith(DASHES):
                break
            dashed_count += 1

            option = argument[len(DASHES) :]
            if not option:
                options[DASHES] = True
                break

            matched = match_long_option(option)
            if matched is None:
                if strict:
                    raise InvalidArgumentError(raw_argument)
                _LOGGER.debug("Ignoring invalid argument '%s'", raw_argument)
                continue

            name, value = matched
            if allowed is not None and name not in allowed:
                if strict:
                    raise DisallowedOptionError(name)
                _LOGGER.debug("Ignoring not allowed option '%s'", name)
                continue

            options[name] = True if value is None else value

        self._options = MappingProxyType(options)
        self._params = arguments[dashed_count:]
        _LOGGER.debug(
            "Classified %d options and %d params", len(options), len(self._params)
        )

    @classmethod
    def from_argv(cls, argv: Sequence[str] | None = None, **kwargs) -> CommandLine:
        """Classify the process arguments (by default, ‘sys.argv’).

        The first element of ‘argv’ is the script name and is not classified.
        Keyword arguments are passed on to the constructor.
        """
        if argv is None:
            argv = sys.argv
        script = argv[0] if argv else ""
        return cls(argv[1:], script=script, **kwargs)

    @classmethod
    def from_config(
        cls, raw_arguments: Sequence[str], config: ClassifierConfig, script: str = ""
    ) -> CommandLine:
        return cls(
            raw_arguments,
            strict=config.strict,
            allowed_options=config.allowed_options,
            short_option_map=config.short_options,
            script=script,
        )

    @staticmethod
    def binary() -> str:
        """Return the path of the Python interpreter running the script."""
        return sys.executable

    def script(self) -> str:
        return self._script

    def option(self, option_name: str, strict: bool = False) -> OptionValue | None:
        """Return the value of an option, or None if it does not exist.

        Raises:
            NonexistentOptionError: If ‘strict’ and the option does not exist.
        """
        value = self._options.get(option_name)
        if value is None and strict:
            raise NonexistentOptionError(option_name)
        return value

    def options(self) -> Mapping[str, OptionValue]:
        """Return all options as a read-only mapping."""
        return self._options

    def param(self, index: int, strict: bool = False) -> str | None:
        """Return the param at the zero-based ‘index’, or None if it does not exist.

        Raises:
            InvalidIndexError: If ‘index’ is negative, regardless of ‘strict’.
            NonexistentParamError: If ‘strict’ and the param does not exist.
        """
        if index < 0:
            raise InvalidIndexError(index)
        if index < len(self._params):
            return self._params[index]
        if strict:
            raise NonexistentParamError(index)
        return None

    def params(self) -> tuple[str, ...]:
        return self._params

    def __repr__(self):
        return (
            f"{type(self).__name__}(script={self._script!r}, "
            f"options={dict(self._options)!r}, params={list(self._params)!r})"
        )
