# -*- coding: utf-8 -*-
# BSD 3-Clause License
#
# Copyright (c) 2020-2023, Faster Speeding
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice, this
#   list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of the copyright holder nor the names of its
#   contributors may be used to endorse or promote products derived from
#   this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
# DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
# FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
# OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
"""The errors raised within and by Commandeer."""
from __future__ import annotations

__all__: list[str] = [
    "CommandeerError",
    "ConversionError",
    "InvalidChoiceError",
    "InvalidTokenError",
    "MissingRequiredError",
    "PreconditionError",
    "ShapeError",
    "UnknownSubCommandError",
]

import typing
from collections import abc as collections

if typing.TYPE_CHECKING:
    from . import schema


class CommandeerError(Exception):
    """The base class for all errors raised by Commandeer."""


class PreconditionError(CommandeerError, TypeError):
    """Error raised when an invocation's token sequence is malformed.

    This is raised before any of the command's option tree is walked.
    """


class ShapeError(CommandeerError, ValueError):
    """Base error raised when an invocation doesn't fit a command's schema.

    !!! note
        Expected errors raised by the encoder will subclass this error.
    """

    message: str
    """String message for this error.

    !!! note
        This may be relayed to the operator as feedback.
    """

    parameter: typing.Optional[str]
    """Name of the option this was raised for.

    !!! note
        This will be [None][] if it wasn't raised for a specific option.
    """

    def __init__(self, message: str, parameter: typing.Optional[str] = None, /) -> None:
        """Initialise a shape error.

        Parameters
        ----------
        message
            String message for this error.
        parameter
            Name of the option which caused this error, should be [None][]
            if not applicable.
        """
        super().__init__(message)
        self.message = message
        self.parameter = parameter

    def __str__(self) -> str:
        return self.message


class UnknownSubCommandError(ShapeError):
    """Error raised when the leading token doesn't name a known sub-command."""

    token: typing.Optional[str]
    """The token which failed to match or [None][] if it was missing."""

    def __init__(self, message: str, token: typing.Optional[str], /) -> None:
        """Initialise an unknown sub-command error.

        Parameters
        ----------
        message
            The error message.
        token
            The token which failed to match a sub-command, or [None][] if
            no token was provided.
        """
        super().__init__(message, None)
        self.token = token


class InvalidTokenError(ShapeError):
    """Error raised when a token isn't a plain string."""

    index: int
    """Index of the offending token in the token sequence."""

    def __init__(self, message: str, parameter: typing.Optional[str], /, *, index: int) -> None:
        """Initialise an invalid token error.

        Parameters
        ----------
        message
            The error message.
        parameter
            The option the token was aligned with, if any.
        index
            Index of the offending token.
        """
        super().__init__(message, parameter)
        self.index = index


class InvalidChoiceError(ShapeError):
    """Error raised when a token matches none of an option's choices."""

    choices: collections.Sequence[schema.Choice]
    """The choices which the token could've matched."""

    parameter: str
    """Name of the option this error was raised for."""

    def __init__(self, message: str, parameter: str, /, choices: collections.Iterable[schema.Choice] = ()) -> None:
        """Initialise an invalid choice error.

        Parameters
        ----------
        message
            The error message.
        parameter
            The option this error was raised for.
        choices
            The valid choices for the option.
        """
        super().__init__(message, parameter)
        self.choices = tuple(choices)


class ConversionError(ShapeError):
    """Error raised when a token couldn't be converted to its option's type."""

    errors: collections.Sequence[ValueError]
    """Sequence of the errors that were caught during conversion for this option."""

    parameter: str
    """Name of the option this error was raised for."""

    def __init__(self, message: str, parameter: str, /, errors: collections.Iterable[ValueError] = ()) -> None:
        """Initialise a conversion error.

        Parameters
        ----------
        message
            The error message.
        parameter
            The option this was raised by.
        errors
            An iterable of the source value errors which were raised during conversion.
        """
        super().__init__(message, parameter)
        self.errors = tuple(errors)


class MissingRequiredError(ShapeError):
    """Error raised when a required option wasn't given a token."""

    parameter: str
    """Name of the option this error was raised for."""

    def __init__(self, message: str, parameter: str, /) -> None:
        super().__init__(message, parameter)
