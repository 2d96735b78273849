"""Classifier configuration model classes (configuration file schema).

Sample TOML configuration file:

    [classifier]
    strict = true
    allowed_options = ["verbose", "level"]

    [classifier.short_options]
    v = "verbose"
    l = "level"

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import os
from typing import Annotated, Any, Final, Optional, override

from pydantic import BaseModel, Field, ValidationError

from ..grammar import OPTION_NAME_PATTERN, SHORT_NAME_PATTERN

STRICT_ENV_VAR: Final = "CMDLINE_ARGS_STRICT"


class ConfigError(Exception):
    pass


LongName = Annotated[str, Field(pattern=rf"^{OPTION_NAME_PATTERN}$")]
ShortName = Annotated[str, Field(pattern=rf"^{SHORT_NAME_PATTERN}$")]


def bool_var(name: str) -> Optional[bool]:
    """Parse a boolean environment variable, or return None if it is not set."""
    val = os.environ.get(name, "").strip()
    if not val:
        return None
    return val.lower() not in ("0", "no", "false", "off")


class ClassifierConfig(BaseModel):
    # strict: Raise errors for malformed arguments and not allowed options
    # instead of ignoring them.
    strict: bool = False
    # allowed_options: If provided (even as an empty list), options not listed
    # here are ignored, or rejected in strict mode.
    allowed_options: Optional[list[LongName]] = None
    # short_options: Map of short option names to long option names, e.g.
    # {v = "verbose"} so that ‘-v’ is read as ‘--verbose’.
    short_options: dict[ShortName, LongName] = {}

    # pylint incorrectly reports that the parent has a different number of arguments.
    # pylint: disable=arguments-differ
    @override
    def model_post_init(self, context: Any):
        """Use the value of the CMDLINE_ARGS_STRICT environment variable, if set."""
        # An env var (if set) takes precedence over the config file setting.
        env_strict = bool_var(STRICT_ENV_VAR)
        if env_strict is not None:
            self.strict = env_strict

        return super().model_post_init(context)


def validate_config(config_obj: dict[str, Any]) -> ClassifierConfig:
    """Validate a configuration dictionary using the Pydantic model."""
    try:
        return ClassifierConfig(**config_obj)
    except ValidationError as e:
        raise ConfigError(f"Invalid classifier configuration:\n{e}") from e


def load_config_file(config_file: str) -> ClassifierConfig:
    """Load, parse and validate the ‘[classifier]’ table of a TOML file.

    A file without a ‘[classifier]’ table yields the default configuration.
    """
    from tomllib import load, TOMLDecodeError

    with open(config_file, "rb") as f:
        try:
            config_obj = load(f)
        except TOMLDecodeError as e:
            raise ConfigError(
                f"Failed to parse configuration file '{config_file}':\n{e}"
            ) from e

    section = config_obj.get("classifier", {})
    if not isinstance(section, dict):
        raise ConfigError(
            f"Section 'classifier' is not a table in configuration file '{config_file}'"
        )
    return validate_config(section)
