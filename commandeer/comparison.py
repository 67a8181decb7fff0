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
"""Structural comparison of command schemas.

This decides whether a locally declared command matches the one already
registered with the server (e.g. to skip an unnecessary re-declaration);
it isn't a general deep-equality utility. Fields which the candidate
leaves undeclared are only compared where the server would fill them in
with a default.

The server doesn't guarantee that options and choices keep their order
between requests, so whether order matters is left up to the caller.
"""
from __future__ import annotations

__all__: list[str] = ["all_commands_equal", "commands_equal", "options_equal"]

import typing
from collections import abc as collections

import hikari

from . import _internal
from . import schema
from . import transcoding

_RawOrCommand = typing.Union[schema.Command, collections.Mapping[str, typing.Any]]
_RawOrOption = typing.Union[schema.Option, collections.Mapping[str, typing.Any]]


def _default_permission(command: schema.Command, /) -> bool:
    return True if command.default_permission is hikari.UNDEFINED else command.default_permission


def commands_equal(command: schema.Command, other: _RawOrCommand, /, *, strict_order: bool = False) -> bool:
    """Compare an existing command with a candidate command.

    Parameters
    ----------
    command
        The existing command.
    other
        The candidate command.

        This may also be a raw declared payload.

    Other Parameters
    ----------------
    strict_order
        Whether options and choices must be in the same order.

    Returns
    -------
    bool
        Whether the candidate matches the existing command.
    """
    if isinstance(other, collections.Mapping):
        other = transcoding.command_to_model(other)

    if other.id is not hikari.UNDEFINED and other.id != command.id:
        return False

    if (
        other.name != command.name
        or other.description is not hikari.UNDEFINED
        and other.description != command.description
        or other.version is not hikari.UNDEFINED
        and other.version != command.version
        or other.autocomplete is not hikari.UNDEFINED
        and other.autocomplete != command.autocomplete
        or other.type is not hikari.UNDEFINED
        and other.type != command.resolved_type
        or len(other.options) != len(command.options)
        or _default_permission(other) != _default_permission(command)
    ):
        return False

    return options_equal(command.options, other.options, strict_order=strict_order)


def options_equal(
    existing: collections.Sequence[schema.Option],
    options: collections.Sequence[_RawOrOption],
    /,
    *,
    strict_order: bool = False,
) -> bool:
    """Recursively compare two sequences of options.

    Parameters
    ----------
    existing
        The options on the existing command.
    options
        The candidate options.

        These may also be raw declared payloads.

    Other Parameters
    ----------------
    strict_order
        Whether options and choices must be in the same order.

        When this is [False][] options are matched by name, which is only
        well-defined when names are unique per level.

    Returns
    -------
    bool
        Whether the candidate options match the existing options.
    """
    if len(existing) != len(options):
        return False

    candidates = [transcoding.to_model(o) if isinstance(o, collections.Mapping) else o for o in options]
    if strict_order:
        return all(_option_equals(o, c, strict_order=True) for o, c in zip(existing, candidates))

    by_name = _internal.index_by_name(candidates)
    for option in existing:
        found = by_name.get(option.name)
        if found is None or not _option_equals(option, found, strict_order=False):
            return False

    return True


def _choices_equal(
    existing: collections.Sequence[schema.Choice],
    choices: collections.Sequence[schema.Choice],
    /,
    *,
    strict_order: bool,
) -> bool:
    if strict_order:
        return all(c.name == o.name and c.value == o.value for c, o in zip(existing, choices))

    by_name = _internal.index_by_name(choices)
    for choice in existing:
        found = by_name.get(choice.name)
        if found is None or found.value != choice.value:
            return False

    return True


def _option_equals(existing: schema.Option, option: schema.Option, /, *, strict_order: bool) -> bool:
    if (
        option.name != existing.name
        or option.type != existing.type
        or option.description != existing.description
        or option.autocomplete != existing.autocomplete
        or _internal.default_required(option.type, option.required)
        != _internal.default_required(existing.type, existing.required)
        or len(option.choices) != len(existing.choices)
        or len(option.options) != len(existing.options)
        or len(option.channel_types) != len(existing.channel_types)
        or option.min_value != existing.min_value
        or option.max_value != existing.max_value
    ):
        return False

    if existing.choices and not _choices_equal(existing.choices, option.choices, strict_order=strict_order):
        return False

    # Channel types are an unordered filter so these are compared as sets.
    if existing.channel_types and set(existing.channel_types) != set(option.channel_types):
        return False

    if existing.options:
        return options_equal(existing.options, option.options, strict_order=strict_order)

    return True


def all_commands_equal(
    commands: collections.Collection[schema.Command],
    others: collections.Iterable[_RawOrCommand],
    /,
    *,
    strict_order: bool = False,
) -> bool:
    """Compare two whole sets of commands.

    Commands are paired up by their resolved type and name.

    Parameters
    ----------
    commands
        The existing commands.
    others
        The candidate commands.

        These may also be raw declared payloads.

    Other Parameters
    ----------------
    strict_order
        Whether options and choices must be in the same order.

    Returns
    -------
    bool
        Whether every existing command has a matching candidate and vice versa.
    """
    candidates = (transcoding.command_to_model(o) if isinstance(o, collections.Mapping) else o for o in others)
    by_key = {(c.resolved_type, c.name): c for c in candidates}
    if len(commands) != len(by_key):
        return False

    for command in commands:
        other = by_key.get((command.resolved_type, command.name))
        if other is None or not commands_equal(command, other, strict_order=strict_order):
            return False

    return True
