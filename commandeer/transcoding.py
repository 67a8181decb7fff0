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
"""Transcoding between raw command payloads and Commandeer's schema types.

Raw payloads (the declared shape a caller builds or the JSON the server
returns) only ever become [commandeer.schema][] objects through this module
and schema objects only become JSON through it.

Several fields have two spellings depending on which schema producer wrote
them: the server's `snake_case` and a compact `camelCase`. Either spelling is
accepted on input (with the compact spelling taking priority when both are
present) but only the server's spelling is ever emitted.
"""
from __future__ import annotations

__all__: list[str] = [
    "choice_to_model",
    "choice_to_wire",
    "command_to_model",
    "command_to_wire",
    "to_model",
    "to_wire",
]

import typing
from collections import abc as collections

import hikari

from . import _internal
from . import schema

_FIELD_SPELLINGS: dict[str, str] = {
    "channel_types": "channelTypes",
    "default_permission": "defaultPermission",
    "max_value": "maxValue",
    "min_value": "minValue",
}
"""Mapping of the server's field names to their compact counterparts."""


def _get(data: collections.Mapping[str, typing.Any], wire_name: str, /) -> typing.Any:
    if compact_name := _FIELD_SPELLINGS.get(wire_name):
        return _internal.get_field(data, compact_name, wire_name)

    return _internal.get_field(data, wire_name)


def _optional_snowflake(value: typing.Any, /) -> hikari.UndefinedOr[hikari.Snowflake]:
    return hikari.UNDEFINED if value is hikari.UNDEFINED else hikari.Snowflake(value)


def _put(data: _internal.JSONObject, key: str, value: typing.Any, /) -> None:
    if value is not hikari.UNDEFINED:
        data[key] = value


def _put_snowflake(data: _internal.JSONObject, key: str, value: hikari.UndefinedOr[hikari.Snowflake], /) -> None:
    if value is not hikari.UNDEFINED:
        data[key] = str(value)


def choice_to_model(payload: collections.Mapping[str, typing.Any], /) -> schema.Choice:
    """Build a choice from its raw payload."""
    return schema.Choice(name=payload["name"], value=payload["value"])


def choice_to_wire(choice: schema.Choice, /) -> _internal.JSONObject:
    """Serialise a choice to its raw payload."""
    return {"name": choice.name, "value": choice.value}


def to_model(payload: collections.Mapping[str, typing.Any], /) -> schema.Option:
    """Build an option from its raw payload.

    Parameters
    ----------
    payload
        The raw option payload.

        The type tags in this may be integer codes, hikari enum members or
        their symbolic names.

    Returns
    -------
    commandeer.schema.Option
        The option model with nested options transcoded recursively.
    """
    option_type = _internal.to_enum(hikari.OptionType, payload["type"])
    channel_types = _get(payload, "channel_types") or ()
    return schema.Option(
        type=option_type,
        name=payload["name"],
        description=_get(payload, "description"),
        required=_internal.default_required(option_type, _get(payload, "required")),
        autocomplete=_get(payload, "autocomplete"),
        choices=map(choice_to_model, _get(payload, "choices") or ()),
        options=map(to_model, _get(payload, "options") or ()),
        channel_types=(_internal.to_enum(hikari.ChannelType, type_) for type_ in channel_types),
        min_value=_get(payload, "min_value"),
        max_value=_get(payload, "max_value"),
    )


def to_wire(option: typing.Union[schema.Option, collections.Mapping[str, typing.Any]], /) -> _internal.JSONObject:
    """Serialise an option to the payload the server accepts.

    Parameters
    ----------
    option
        The option model to serialise.

        A raw declared payload (in either field spelling) may also be passed
        here, in which case it's normalised through [to_model][commandeer.transcoding.to_model] first.

    Returns
    -------
    commandeer._internal.JSONObject
        The raw option payload.
    """
    if isinstance(option, collections.Mapping):
        option = to_model(option)

    data: _internal.JSONObject = {"type": int(option.type), "name": option.name}
    _put(data, "description", option.description)
    _put(data, "required", _internal.default_required(option.type, option.required))
    _put(data, "autocomplete", option.autocomplete)

    if option.choices:
        data["choices"] = [choice_to_wire(choice) for choice in option.choices]

    if option.options:
        data["options"] = [to_wire(nested) for nested in option.options]

    if option.channel_types:
        data["channel_types"] = [int(type_) for type_ in option.channel_types]

    _put(data, "min_value", option.min_value)
    _put(data, "max_value", option.max_value)
    return data


def command_to_model(
    payload: collections.Mapping[str, typing.Any],
    /,
    *,
    guild_id: hikari.UndefinedNoneOr[hikari.Snowflakeish] = hikari.UNDEFINED,
) -> schema.Command:
    """Build a command from its raw payload.

    Parameters
    ----------
    payload
        The raw command payload.

    Other Parameters
    ----------------
    guild_id
        ID of the guild the command was fetched from.

        If left undefined then this will be taken from the payload.

    Returns
    -------
    commandeer.schema.Command
        The command model.
    """
    if guild_id is hikari.UNDEFINED:
        guild_id = payload.get("guild_id")

    command_type = _get(payload, "type")
    if command_type is not hikari.UNDEFINED:
        command_type = _internal.to_enum(hikari.CommandType, command_type)

    return schema.Command(
        id=_optional_snowflake(_get(payload, "id")),
        application_id=_optional_snowflake(_get(payload, "application_id")),
        guild_id=None if guild_id is None else hikari.Snowflake(guild_id),
        version=_optional_snowflake(_get(payload, "version")),
        name=payload["name"],
        description=_get(payload, "description"),
        default_permission=_get(payload, "default_permission"),
        autocomplete=_get(payload, "autocomplete"),
        type=command_type,
        options=map(to_model, _get(payload, "options") or ()),
    )


def command_to_wire(command: schema.Command, /) -> _internal.JSONObject:
    """Serialise a command to the payload used to create or edit it.

    Parameters
    ----------
    command
        The command model to serialise.

    Returns
    -------
    commandeer._internal.JSONObject
        The raw command payload.
    """
    data: _internal.JSONObject = {"name": command.name}
    _put_snowflake(data, "id", command.id)
    _put_snowflake(data, "application_id", command.application_id)

    if command.guild_id is not None:
        data["guild_id"] = str(command.guild_id)

    _put_snowflake(data, "version", command.version)
    _put(data, "description", command.description)
    _put(data, "default_permission", command.default_permission)
    if command.type is not hikari.UNDEFINED:
        data["type"] = int(command.type)

    if command.options:
        data["options"] = [to_wire(option) for option in command.options]

    return data
