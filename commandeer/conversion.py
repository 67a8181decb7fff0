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
"""Functions used to convert invocation tokens to option values."""
from __future__ import annotations

__all__: list[str] = [
    "parse_channel_id",
    "parse_mentionable_id",
    "parse_role_id",
    "parse_user_id",
    "to_bool",
    "to_float",
    "to_int",
]

import math
import re
import typing

import hikari

_SnowflakeIsh = typing.Union[str, int]


class _IDMatcherSigProto(typing.Protocol):
    def __call__(self, value: _SnowflakeIsh, /, *, message: str = "No valid mention or ID found") -> hikari.Snowflake:
        raise NotImplementedError


def _range_check(snowflake: hikari.Snowflake, /) -> bool:
    return snowflake.min() <= snowflake <= snowflake.max()


def _make_snowflake_parser(regex: re.Pattern[str], /) -> _IDMatcherSigProto:
    def parse(value: _SnowflakeIsh, /, *, message: str = "No valid mention or ID found") -> hikari.Snowflake:
        """Parse a snowflake from a string or int value.

        !!! note
            This only allows the relevant entity's mention format if applicable.

        Parameters
        ----------
        value
            The value to parse (this argument can only be passed positionally).
        message
            The error message to raise if the value cannot be parsed.

        Returns
        -------
        hikari.snowflakes.Snowflake
            The parsed snowflake.

        Raises
        ------
        ValueError
            If the value cannot be parsed.
        """
        result: typing.Optional[hikari.Snowflake] = None
        if isinstance(value, int) or value.isdigit():
            result = hikari.Snowflake(value)

        elif capture := regex.fullmatch(value.strip()):
            result = hikari.Snowflake(capture.groups()[0])

        if result is not None and _range_check(result):
            return result

        raise ValueError(message) from None

    return parse


parse_channel_id: _IDMatcherSigProto = _make_snowflake_parser(re.compile(r"<#(\d+)>"))
"""Parse a channel ID from a raw ID or channel mention.

Raises
------
ValueError
    If the value cannot be parsed.
"""

parse_role_id: _IDMatcherSigProto = _make_snowflake_parser(re.compile(r"<@&(\d+)>"))
"""Parse a role ID from a raw ID or role mention.

Raises
------
ValueError
    If the value cannot be parsed.
"""

parse_user_id: _IDMatcherSigProto = _make_snowflake_parser(re.compile(r"<@!?(\d+)>"))
"""Parse a user ID from a raw ID or user mention.

Raises
------
ValueError
    If the value cannot be parsed.
"""

parse_mentionable_id: _IDMatcherSigProto = _make_snowflake_parser(re.compile(r"<@[!&]?(\d+)>"))
"""Parse a user or role ID from a raw ID or either entity's mention.

Raises
------
ValueError
    If the value cannot be parsed.
"""


_YES_VALUES = frozenset(("y", "yes", "t", "true", "on", "1"))
_NO_VALUES = frozenset(("n", "no", "f", "false", "off", "0"))


def to_bool(value: str, /) -> bool:
    """Convert user string input into a boolean value.

    Parameters
    ----------
    value
        The value to convert.

    Returns
    -------
    bool
        The converted value.

    Raises
    ------
    ValueError
        If the value cannot be converted.
    """
    value = value.lower().strip()
    if value in _YES_VALUES:
        return True

    if value in _NO_VALUES:
        return False

    raise ValueError(f"Invalid bool value `{value}`")


def to_int(value: str, /) -> int:
    """Convert user string input into an integer.

    Raises
    ------
    ValueError
        If the value isn't a base 10 integer.
    """
    try:
        return int(value.strip())

    except ValueError:
        raise ValueError(f"Invalid integer value `{value}`") from None


def to_float(value: str, /) -> float:
    """Convert user string input into a finite float.

    Raises
    ------
    ValueError
        If the value isn't a finite number.
    """
    try:
        result = float(value.strip())

    except ValueError:
        raise ValueError(f"Invalid number value `{value}`") from None

    # nan and inf can't be represented in the JSON body.
    if not math.isfinite(result):
        raise ValueError(f"Invalid number value `{value}`")

    return result
