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
"""Client-side encoding of application command invocations.

An invocation is built from a command's schema and a flat sequence of string
tokens without any schema negotiation with the server; the tokens are
routed through any sub-commands, matched up with the options positionally,
converted to each option's type and checked against the constraints the
schema declares before anything is submitted.
"""
from __future__ import annotations

__all__: list[str] = ["INTERACTION_TYPE", "ContextMenuTarget", "encode", "encode_context_menu"]

import logging
import typing
from collections import abc as collections

import hikari
import typing_extensions

from . import _internal
from . import conversion
from . import errors
from . import schema

_LOGGER = logging.getLogger("hikari.commandeer.invoking")

INTERACTION_TYPE: typing.Final[int] = 2
"""The interaction type discriminator for application command invocations."""

ContextMenuTarget = typing.Union[hikari.PartialMessage, hikari.PartialUser, hikari.Snowflakeish]
"""Type hint of the target a context menu command may be invoked on."""


def _snowflake_converter(
    parser: collections.Callable[[str], hikari.Snowflake], /
) -> collections.Callable[[str], str]:
    def convert(value: str, /) -> str:
        return str(parser(value))

    return convert


_CONVERTERS: dict[hikari.OptionType, collections.Callable[[str], typing.Any]] = {
    hikari.OptionType.INTEGER: conversion.to_int,
    hikari.OptionType.FLOAT: conversion.to_float,
    hikari.OptionType.BOOLEAN: conversion.to_bool,
    hikari.OptionType.USER: _snowflake_converter(conversion.parse_user_id),
    hikari.OptionType.CHANNEL: _snowflake_converter(conversion.parse_channel_id),
    hikari.OptionType.ROLE: _snowflake_converter(conversion.parse_role_id),
    hikari.OptionType.MENTIONABLE: _snowflake_converter(conversion.parse_mentionable_id),
}
"""Converters for option types whose values aren't sent as the raw token."""


def _is_token_sequence(value: typing.Any, /) -> typing_extensions.TypeGuard[collections.Sequence[typing.Any]]:
    return isinstance(value, collections.Sequence) and not isinstance(value, (str, bytes, bytearray))


def _matches_value(value: schema.ChoiceValue, token: str, /) -> bool:
    if isinstance(value, str):
        return value == token

    try:
        return float(token) == value

    except ValueError:
        return False


def _find_choice(option: schema.Option, token: str, /) -> schema.Choice:
    for choice in option.choices:
        if choice.name == token:
            return choice

    for choice in option.choices:
        if _matches_value(choice.value, token):
            return choice

    choices = "\n".join(
        f"#{index} Name: {choice.name} Value: {choice.value}" for index, choice in enumerate(option.choices, start=1)
    )
    raise errors.InvalidChoiceError(
        f"Invalid option: {token!r} is not a valid choice for {option.name!r}\nList of choices:\n{choices}",
        option.name,
        choices=option.choices,
    )


def _check_bounds(option: schema.Option, value: typing.Union[int, float], /) -> None:
    if option.min_value is not hikari.UNDEFINED and value < option.min_value:
        raise errors.ConversionError(
            f"`{option.name}` must be greater than or equal to {option.min_value}", option.name
        )

    if option.max_value is not hikari.UNDEFINED and value > option.max_value:
        raise errors.ConversionError(f"`{option.name}` must be less than or equal to {option.max_value}", option.name)


def _convert(option: schema.Option, token: str, /) -> typing.Any:
    if option.choices:
        return _find_choice(option, token).value

    converter = _CONVERTERS.get(option.type)
    if converter is None:
        return token

    try:
        value = converter(token)

    except ValueError as exc:
        raise errors.ConversionError(
            f"Couldn't convert {token!r} for option {option.name!r}: {exc}", option.name, errors=[exc]
        ) from exc

    if option.type in (hikari.OptionType.INTEGER, hikari.OptionType.FLOAT):
        _check_bounds(option, value)

    return value


def _route(
    command: schema.Command, tokens: collections.Sequence[typing.Any], /
) -> tuple[list[schema.Option], collections.Sequence[schema.Option], collections.Sequence[typing.Any]]:
    path: list[schema.Option] = []
    options: collections.Sequence[schema.Option] = command.options
    index = 0
    while any(option.is_sub_command for option in options):
        names = ", ".join(repr(option.name) for option in options)
        if index >= len(tokens):
            raise errors.UnknownSubCommandError(f"Missing sub-command, expected one of {names}", None)

        token = tokens[index]
        if not isinstance(token, str):
            raise errors.InvalidTokenError(
                f"Expected a string sub-command name, got {type(token).__name__}", None, index=index
            )

        for option in options:
            if option.name == token:
                break

        else:
            raise errors.UnknownSubCommandError(f"Unknown sub-command {token!r}, expected one of {names}", token)

        path.append(option)
        options = option.options
        index += 1

    return path, options, tokens[index:]


def _build_options(
    options: collections.Sequence[schema.Option], tokens: collections.Sequence[typing.Any], /, *, offset: int
) -> list[_internal.JSONObject]:
    built: list[_internal.JSONObject] = []
    for index, token in enumerate(tokens):
        option = options[index] if index < len(options) else None
        if not isinstance(token, str):
            raise errors.InvalidTokenError(
                f"Expected option to be a string, got {type(token).__name__}",
                option.name if option is not None else None,
                index=index + offset,
            )

        # Tokens past the declared options are ignored.
        if option is None:
            continue

        built.append({"type": int(option.type), "name": option.name, "value": _convert(option, token)})

    for option in options[len(tokens) :]:
        if option.required is True:
            raise errors.MissingRequiredError(f"Missing required value for option {option.name!r}", option.name)

    return built


def _build_body(
    command: schema.Command, context: schema.InvocationContext, extra: _internal.JSONObject, /
) -> _internal.JSONObject:
    if command.id is hikari.UNDEFINED or command.application_id is hikari.UNDEFINED:
        raise errors.ShapeError(f"Cannot invoke {command.name!r} as it hasn't been registered")

    data: _internal.JSONObject = {
        "version": None if command.version is hikari.UNDEFINED else str(command.version),
        "id": str(command.id),
        "name": command.name,
        "type": int(command.resolved_type),
    }
    data.update(extra)
    return {
        "type": INTERACTION_TYPE,
        "application_id": str(command.application_id),
        "guild_id": None if context.guild_id is None else str(context.guild_id),
        "channel_id": str(context.channel_id),
        "session_id": context.session_id,
        "data": data,
    }


def encode(
    command: schema.Command, tokens: collections.Sequence[str], /, context: schema.InvocationContext
) -> typing.Optional[_internal.JSONObject]:
    """Encode a chat-input command invocation.

    Parameters
    ----------
    command
        The registered command to invoke.
    tokens
        The string arguments to invoke it with, in order.

        If the command has sub-commands then the leading token(s) must name
        the sub-command (group) to route to.
    context
        The connection bound values to invoke it with.

    Returns
    -------
    commandeer._internal.JSONObject | None
        The interaction body to submit.

        This will be [None][] if the command isn't a chat-input command.

    Raises
    ------
    commandeer.errors.PreconditionError
        If `tokens` isn't a sequence of strings.
    commandeer.errors.ShapeError
        If the tokens don't fit the command's schema.
    """
    if not _is_token_sequence(tokens):
        raise errors.PreconditionError(f"Tokens must be a sequence of strings, not {type(tokens).__name__}")

    if not command.is_parametric:
        _LOGGER.debug("Not encoding %r as a chat-input invocation as it's a %s command", command.name, command.type)
        return None

    path, options, tokens = _route(command, tokens)
    built = _build_options(options, tokens, offset=len(path))
    for node in reversed(path):
        built = [{"type": int(node.type), "name": node.name, "options": built}]

    body = _build_body(command, context, {"options": built})
    _LOGGER.debug("Encoded invocation of %r", " ".join([command.name, *(node.name for node in path)]))
    return body


def _resolve_target(command_type: hikari.CommandType, target: ContextMenuTarget, /) -> hikari.Snowflake:
    if command_type is hikari.CommandType.USER:
        if isinstance(target, hikari.PartialMessage):
            if target.author is hikari.UNDEFINED:
                raise errors.ShapeError("Cannot target the author of a message with no known author")

            return target.author.id

        if isinstance(target, hikari.PartialUser):
            return target.id

    elif isinstance(target, hikari.PartialUser):
        raise errors.ShapeError("Message commands must target a message")

    elif isinstance(target, hikari.PartialMessage):
        return target.id

    return hikari.Snowflake(target)


def encode_context_menu(
    command: schema.Command, target: ContextMenuTarget, /, context: schema.InvocationContext
) -> typing.Optional[_internal.JSONObject]:
    """Encode a context menu command invocation.

    Parameters
    ----------
    command
        The registered user or message command to invoke.
    target
        The entity to invoke it on.

        For user commands this may be a user, the ID of a user or a message
        (in which case the message's author is targeted). For message commands
        this may be a message or its ID.
    context
        The connection bound values to invoke it with.

    Returns
    -------
    commandeer._internal.JSONObject | None
        The interaction body to submit.

        This will be [None][] if the command is a chat-input command.

    Raises
    ------
    commandeer.errors.ShapeError
        If the target doesn't suit the command's type.
    """
    if command.is_parametric:
        _LOGGER.debug("Not encoding %r as a context menu invocation as it's a chat-input command", command.name)
        return None

    target_id = _resolve_target(command.resolved_type, target)
    body = _build_body(command, context, {"target_id": str(target_id)})
    _LOGGER.debug("Encoded %s context menu invocation of %r", command.resolved_type, command.name)
    return body
