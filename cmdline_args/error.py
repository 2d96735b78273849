"""Error classes raised by the command line classifier.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    NOT_ALLOWED_OPTION = 1
    INVALID_ARGUMENT = 2
    NONEXISTENT_OPTION = 3
    NONEXISTENT_PARAM = 4
    INVALID_INDEX = 5


class CommandLineError(ValueError):
    """Base class of the classifier errors.

    The ‘code’ attribute allows callers to branch on a stable numeric value
    instead of on the exception class.
    """

    code: ErrorCode


class InvalidArgumentError(CommandLineError):
    code = ErrorCode.INVALID_ARGUMENT

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Invalid argument: {argument}")


class DisallowedOptionError(CommandLineError):
    code = ErrorCode.NOT_ALLOWED_OPTION

    def __init__(self, option_name: str):
        self.option_name = option_name
        super().__init__(f"Not allowed option '{option_name}'")


class NonexistentOptionError(CommandLineError):
    code = ErrorCode.NONEXISTENT_OPTION

    def __init__(self, option_name: str):
        self.option_name = option_name
        super().__init__(f"Option '{option_name}' does not exist")


class NonexistentParamError(CommandLineError):
    code = ErrorCode.NONEXISTENT_PARAM

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Param '{index}' does not exist")


class InvalidIndexError(CommandLineError):
    code = ErrorCode.INVALID_INDEX

    def __init__(self, index: int):
        self.index = index
        super().__init__("Index cannot be lower than 0")
