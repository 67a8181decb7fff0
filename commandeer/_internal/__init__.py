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
"""Internal utility classes and functions used by Commandeer."""
from __future__ import annotations

__all__: list[str] = []

import typing
from collections import abc as collections

import hikari

if typing.TYPE_CHECKING:
    _T = typing.TypeVar("_T")


_EnumT = typing.TypeVar("_EnumT", hikari.ChannelType, hikari.CommandType, hikari.OptionType)
_NamedT = typing.TypeVar("_NamedT", bound="_NamedProto")

JSONObject = dict[str, typing.Any]
"""Type hint of a deserialised JSON object."""

SUB_COMMAND_OPTION_TYPES: typing.Final[frozenset[hikari.OptionType]] = frozenset(
    [hikari.OptionType.SUB_COMMAND, hikari.OptionType.SUB_COMMAND_GROUP]
)
"""Option types which only route to nested options and never carry a value."""


class _NamedProto(typing.Protocol):
    @property
    def name(self) -> str:
        raise NotImplementedError


# Other schema producers spell some of hikari's member names differently.
_NAME_ALIASES: dict[type[typing.Any], dict[str, typing.Any]] = {
    hikari.CommandType: {"CHAT_INPUT": hikari.CommandType.SLASH},
    hikari.OptionType: {"NUMBER": hikari.OptionType.FLOAT},
    hikari.ChannelType: {},
}

for _enum_type, _aliases in _NAME_ALIASES.items():
    for _member in _enum_type:
        _aliases[_member.name] = _member


def to_enum(enum_type: type[_EnumT], value: typing.Union[_EnumT, int, str], /) -> _EnumT:
    """Normalise a type tag to its enum member.

    Parameters
    ----------
    enum_type
        The hikari enum the tag belongs to.
    value
        Either the enum member, its integer code or its symbolic name.

        Names are matched case-insensitively.

    Returns
    -------
    _EnumT
        The normalised member.

    Raises
    ------
    ValueError
        If a symbolic name doesn't match any member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return _NAME_ALIASES[enum_type][value.upper()]

        except KeyError:
            raise ValueError(f"Unknown {enum_type.__name__} name {value!r}") from None

    return enum_type(value)


def default_required(option_type: hikari.OptionType, required: hikari.UndefinedOr[bool], /) -> hikari.UndefinedOr[bool]:
    """Resolve an option's required flag with its type-dependent default.

    Sub-command and sub-command group options are never "required" so their
    flag stays undefined when omitted, everything else defaults to [False][].
    """
    if required is not hikari.UNDEFINED:
        return required

    if option_type in SUB_COMMAND_OPTION_TYPES:
        return hikari.UNDEFINED

    return False


def index_by_name(values: collections.Iterable[_NamedT], /) -> dict[str, _NamedT]:
    """Build a name-keyed lookup of schema entries.

    Later entries shadow earlier ones which share a name.
    """
    return {value.name: value for value in values}


def get_field(data: collections.Mapping[str, _T], *names: str) -> hikari.UndefinedOr[_T]:
    """Get the first of several spellings of a field which is set in a mapping.

    A field which is present but [None][] is treated as absent.
    """
    for name in names:
        if (value := data.get(name)) is not None:
            return value

    return hikari.UNDEFINED
