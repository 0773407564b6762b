#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/core/errors.py

from typing import Optional


class TailshadeError(Exception):
    """Base class for every error the CLI catches and reports."""


class InvalidColorError(TailshadeError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"invalid color: '{value}'")


class MisuseError(TailshadeError):
    """Required merge arguments are missing or empty."""


class ConfigError(TailshadeError):
    pass


class ConfigReadError(ConfigError):
    """The config file could not be read or does not have the expected shape."""


class ConfigParseError(ConfigReadError):
    """
    The config text is not a module export of a plain object literal.
    Carries the 1-based line and column of the offending token.
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.reason = message
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class ConfigWriteError(ConfigError):
    pass


class BackupError(ConfigError):
    pass
