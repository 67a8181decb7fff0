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
"""Immutable value types which model a received application command schema.

These are snapshots; an edit is made by building a new snapshot and
submitting it rather than by mutating a cached one in place. Raw
JSON payloads only become these types through [commandeer.transcoding][].
"""
from __future__ import annotations

__all__: list[str] = ["Choice", "Command", "InvocationContext", "Option"]

import datetime
import typing

import attr
import hikari

from . import _internal

ChoiceValue = typing.Union[str, int, float]
"""Type hint of the value an option choice may carry."""


@attr.attrs(frozen=True, kw_only=True, slots=True)
class Choice:
    """An enumerated permissible value for a scalar option."""

    name: str = attr.attrib()
    """The user facing label of this choice."""

    value: ChoiceValue = attr.attrib()
    """The value this choice submits."""


def _validate_option(option: Option, _: attr.Attribute[typing.Any], __: typing.Any) -> None:
    if option.choices and option.options:
        raise ValueError(f"Option {option.name!r} cannot have both choices and nested options")

    if option.type is hikari.OptionType.SUB_COMMAND_GROUP and any(
        o.type is not hikari.OptionType.SUB_COMMAND for o in option.options
    ):
        raise ValueError(f"Sub-command group {option.name!r} can only contain sub-commands")

    if (
        isinstance(option.min_value, (int, float))
        and isinstance(option.max_value, (int, float))
        and option.min_value > option.max_value
    ):
        raise ValueError("`min_value` cannot be greater than `max_value`")


@attr.attrs(frozen=True, kw_only=True, slots=True)
class Option:
    """One parameter (or routing node) within a command's schema tree."""

    type: hikari.OptionType = attr.attrib()
    """The declared type of this option."""

    name: str = attr.attrib(validator=_validate_option)
    """The name of this option."""

    description: hikari.UndefinedOr[str] = attr.attrib(default=hikari.UNDEFINED)
    """The user facing description of this option."""

    required: hikari.UndefinedOr[bool] = attr.attrib(default=hikari.UNDEFINED)
    """Whether this option must be provided.

    This is left undefined for sub-command and sub-command group options.
    """

    autocomplete: hikari.UndefinedOr[bool] = attr.attrib(default=hikari.UNDEFINED)
    """Whether this option's values are autocompleted."""

    choices: tuple[Choice, ...] = attr.attrib(converter=tuple, factory=tuple)
    """The choices this option is limited to, if any."""

    options: tuple[Option, ...] = attr.attrib(converter=tuple, factory=tuple)
    """The options nested under this sub-command (group) option, if any."""

    channel_types: tuple[hikari.ChannelType, ...] = attr.attrib(converter=tuple, factory=tuple)
    """The channel types a channel option is filtered to, if any."""

    min_value: hikari.UndefinedOr[typing.Union[int, float]] = attr.attrib(default=hikari.UNDEFINED)
    """The minimum value of an integer or number option."""

    max_value: hikari.UndefinedOr[typing.Union[int, float]] = attr.attrib(default=hikari.UNDEFINED)
    """The maximum value of an integer or number option."""

    @property
    def is_sub_command(self) -> bool:
        """Whether this option is a sub-command or sub-command group."""
        return self.type in _internal.SUB_COMMAND_OPTION_TYPES


def _validate_command(command: Command, _: attr.Attribute[typing.Any], __: typing.Any) -> None:
    routing = {option.is_sub_command for option in command.options}
    if len(routing) > 1:
        raise ValueError(f"Command {command.name!r} cannot mix sub-commands with value options")


@attr.attrs(frozen=True, kw_only=True, slots=True)
class Command:
    """A named, remotely registered procedure descriptor."""

    id: hikari.UndefinedOr[hikari.Snowflake] = attr.attrib(default=hikari.UNDEFINED)
    """The command's ID."""

    application_id: hikari.UndefinedOr[hikari.Snowflake] = attr.attrib(default=hikari.UNDEFINED)
    """ID of the application which owns this command."""

    guild_id: typing.Optional[hikari.Snowflake] = attr.attrib(default=None)
    """ID of the guild this command is bound to.

    This is [None][] for global commands.
    """

    version: hikari.UndefinedOr[hikari.Snowflake] = attr.attrib(default=hikari.UNDEFINED)
    """Version stamp which the server reassigns on any schema affecting edit."""

    name: str = attr.attrib(validator=_validate_command)
    """The command's name."""

    description: hikari.UndefinedOr[str] = attr.attrib(default=hikari.UNDEFINED)
    """The command's user facing description."""

    default_permission: hikari.UndefinedOr[bool] = attr.attrib(default=hikari.UNDEFINED)
    """Whether the command is enabled by default when the application is added to a guild."""

    autocomplete: hikari.UndefinedOr[bool] = attr.attrib(default=hikari.UNDEFINED)
    """Command level autocomplete flag, only set by some schema producers."""

    type: hikari.UndefinedOr[hikari.CommandType] = attr.attrib(default=hikari.UNDEFINED)
    """The command's kind as declared."""

    options: tuple[Option, ...] = attr.attrib(converter=tuple, factory=tuple)
    """The command's top level options."""

    @property
    def resolved_type(self) -> hikari.CommandType:
        """The command's kind, defaulting to a chat-input (slash) command when undeclared."""
        if self.type is hikari.UNDEFINED:
            return hikari.CommandType.SLASH

        return self.type

    @property
    def created_at(self) -> datetime.datetime:
        """When this command was created.

        Raises
        ------
        ValueError
            If this command has no ID.
        """
        if self.id is hikari.UNDEFINED:
            raise ValueError("Cannot get the creation time of a command with no ID")

        return self.id.created_at

    @property
    def is_global(self) -> bool:
        """Whether this command isn't bound to a specific guild."""
        return self.guild_id is None

    @property
    def is_parametric(self) -> bool:
        """Whether this is a chat-input command which takes options."""
        return self.resolved_type is hikari.CommandType.SLASH


@attr.attrs(frozen=True, kw_only=True, slots=True)
class InvocationContext:
    """The connection bound values an invocation is submitted with.

    These are opaque pass-through values.
    """

    session_id: str = attr.attrib()
    """ID of the session the invocation is sent from."""

    channel_id: hikari.Snowflake = attr.attrib(converter=hikari.Snowflake)
    """ID of the channel the invocation targets."""

    guild_id: typing.Optional[hikari.Snowflake] = attr.attrib(
        default=None, converter=attr.converters.optional(hikari.Snowflake)
    )
    """ID of the guild the invocation targets, if any."""

    @classmethod
    def from_message(cls, message: hikari.PartialMessage, /, session_id: str) -> InvocationContext:
        """Build an invocation context for the channel a message was sent in.

        Parameters
        ----------
        message
            The message to take the channel and guild IDs from.
        session_id
            ID of the session the invocation is sent from.
        """
        return cls(session_id=session_id, channel_id=message.channel_id, guild_id=message.guild_id)
