# -*- coding: utf-8 -*-
# cython: language_level=3
# BSD 3-Clause License
#
# Copyright (c) 2020-2022, Faster Speeding
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

# pyright: reportIncompatibleMethodOverride=none
# pyright: reportUnknownMemberType=none
# This leads to too many false-positives around mocks.

import typing
from unittest import mock

import hikari
import pytest

import commandeer

CONTEXT = commandeer.InvocationContext(session_id="sesh", channel_id=hikari.Snowflake(222), guild_id=111)


def _command(*options: commandeer.Option, **kwargs: typing.Any) -> commandeer.Command:
    kwargs.setdefault("type", hikari.CommandType.SLASH)
    return commandeer.Command(
        id=hikari.Snowflake(4444),
        application_id=hikari.Snowflake(3333),
        version=hikari.Snowflake(5555),
        name=kwargs.pop("name", "cmd"),
        options=options,
        **kwargs,
    )


def _option(name: str, option_type: hikari.OptionType = hikari.OptionType.STRING, **kwargs: typing.Any):
    return commandeer.Option(type=option_type, name=name, **kwargs)


def _role_command() -> commandeer.Command:
    return _command(
        _option(
            "add",
            hikari.OptionType.SUB_COMMAND,
            options=[_option("role", required=True), _option("reason")],
        ),
        _option("remove", hikari.OptionType.SUB_COMMAND, options=[_option("role", required=True)]),
        name="role",
    )


class TestEncode:
    def test(self):
        command = _command(_option("a", required=True))

        result = commandeer.encode(command, ["x"], CONTEXT)

        assert result == {
            "type": 2,
            "application_id": "3333",
            "guild_id": "111",
            "channel_id": "222",
            "session_id": "sesh",
            "data": {
                "version": "5555",
                "id": "4444",
                "name": "cmd",
                "type": 1,
                "options": [{"type": 3, "name": "a", "value": "x"}],
            },
        }

    def test_when_required_option_missing(self):
        command = _command(_option("a", required=True))

        with pytest.raises(commandeer.MissingRequiredError, match="Missing required value for option 'a'") as exc:
            commandeer.encode(command, [], CONTEXT)

        assert exc.value.parameter == "a"
        assert isinstance(exc.value, commandeer.ShapeError)

    def test_when_optional_options_missing(self):
        command = _command(_option("a", required=True), _option("b"))

        result = commandeer.encode(command, ["meow"], CONTEXT)

        assert result
        assert result["data"]["options"] == [{"type": 3, "name": "a", "value": "meow"}]

    def test_ignores_extra_tokens(self):
        command = _command(_option("a"))

        result = commandeer.encode(command, ["meow", "nyan", "purr"], CONTEXT)

        assert result
        assert result["data"]["options"] == [{"type": 3, "name": "a", "value": "meow"}]

    def test_when_command_has_no_options(self):
        result = commandeer.encode(_command(), [], CONTEXT)

        assert result
        assert result["data"]["options"] == []

    def test_when_type_undeclared(self):
        result = commandeer.encode(_command(type=hikari.UNDEFINED), [], CONTEXT)

        assert result
        assert result["data"]["type"] == 1

    def test_without_guild(self):
        context = commandeer.InvocationContext(session_id="sesh", channel_id=222)

        result = commandeer.encode(_command(), [], context)

        assert result
        assert result["guild_id"] is None

    @pytest.mark.parametrize("command_type", [hikari.CommandType.USER, hikari.CommandType.MESSAGE])
    def test_when_not_chat_input_command(self, command_type: hikari.CommandType):
        assert commandeer.encode(_command(type=command_type), ["a"], CONTEXT) is None

    @pytest.mark.parametrize("tokens", ["meow", b"meow", 123, None, {"a"}])
    def test_when_tokens_not_a_sequence(self, tokens: typing.Any):
        with pytest.raises(commandeer.PreconditionError, match="Tokens must be a sequence of strings"):
            commandeer.encode(_command(_option("a")), tokens, CONTEXT)

    def test_when_token_not_a_string(self):
        command = _command(_option("a"), _option("b", hikari.OptionType.INTEGER))

        with pytest.raises(commandeer.InvalidTokenError, match="Expected option to be a string, got int") as exc:
            commandeer.encode(command, ["a", 5], CONTEXT)  # type: ignore

        assert exc.value.parameter == "b"
        assert exc.value.index == 1

    def test_when_extra_token_not_a_string(self):
        with pytest.raises(commandeer.InvalidTokenError) as exc:
            commandeer.encode(_command(_option("a")), ["a", None], CONTEXT)  # type: ignore

        assert exc.value.parameter is None
        assert exc.value.index == 1

    def test_when_command_not_registered(self):
        command = commandeer.Command(name="meow", type=hikari.CommandType.SLASH)

        with pytest.raises(commandeer.ShapeError, match="Cannot invoke 'meow' as it hasn't been registered"):
            commandeer.encode(command, [], CONTEXT)

    @pytest.mark.parametrize(
        ("option_type", "token", "expected"),
        [
            (hikari.OptionType.STRING, " spaced ", " spaced "),
            (hikari.OptionType.INTEGER, "42", 42),
            (hikari.OptionType.INTEGER, "-7", -7),
            (hikari.OptionType.FLOAT, "1.5", 1.5),
            (hikari.OptionType.BOOLEAN, "true", True),
            (hikari.OptionType.BOOLEAN, "False", False),
            (hikari.OptionType.BOOLEAN, "0", False),
            (hikari.OptionType.USER, "<@!123321>", "123321"),
            (hikari.OptionType.USER, "123321", "123321"),
            (hikari.OptionType.CHANNEL, "<#5431>", "5431"),
            (hikari.OptionType.ROLE, "<@&6543>", "6543"),
            (hikari.OptionType.MENTIONABLE, "<@&6543>", "6543"),
            (hikari.OptionType.MENTIONABLE, "<@6543>", "6543"),
            (hikari.OptionType.ATTACHMENT, "file.png", "file.png"),
        ],
    )
    def test_converts_value(self, option_type: hikari.OptionType, token: str, expected: typing.Any):
        result = commandeer.encode(_command(_option("a", option_type)), [token], CONTEXT)

        assert result
        assert result["data"]["options"] == [{"type": int(option_type), "name": "a", "value": expected}]
        assert type(result["data"]["options"][0]["value"]) is type(expected)

    @pytest.mark.parametrize(
        ("option_type", "token"),
        [
            (hikari.OptionType.INTEGER, "4.2"),
            (hikari.OptionType.INTEGER, "meow"),
            (hikari.OptionType.FLOAT, "nan"),
            (hikari.OptionType.FLOAT, "one"),
            (hikari.OptionType.BOOLEAN, "maybe"),
            (hikari.OptionType.BOOLEAN, ""),
            (hikari.OptionType.USER, "<#123>"),
            (hikari.OptionType.CHANNEL, "<@123>"),
            (hikari.OptionType.ROLE, "role"),
        ],
    )
    def test_when_conversion_fails(self, option_type: hikari.OptionType, token: str):
        with pytest.raises(commandeer.ConversionError, match=f"Couldn't convert '{token}' for option 'a'") as exc:
            commandeer.encode(_command(_option("a", option_type)), [token], CONTEXT)

        assert exc.value.parameter == "a"
        assert len(exc.value.errors) == 1

    @pytest.mark.parametrize(
        ("token", "message"),
        [("0", "`a` must be greater than or equal to 1"), ("11", "`a` must be less than or equal to 10")],
    )
    def test_when_out_of_bounds(self, token: str, message: str):
        command = _command(_option("a", hikari.OptionType.INTEGER, min_value=1, max_value=10))

        with pytest.raises(commandeer.ConversionError, match=message):
            commandeer.encode(command, [token], CONTEXT)

    def test_when_in_bounds(self):
        command = _command(_option("a", hikari.OptionType.FLOAT, min_value=1, max_value=10))

        result = commandeer.encode(command, ["10"], CONTEXT)

        assert result
        assert result["data"]["options"][0]["value"] == 10.0


class TestEncodeChoices:
    def test_matches_name(self):
        choices = [commandeer.Choice(name="five", value=5), commandeer.Choice(name="six", value=6)]
        command = _command(_option("a", hikari.OptionType.INTEGER, choices=choices))

        result = commandeer.encode(command, ["six"], CONTEXT)

        assert result
        assert result["data"]["options"] == [{"type": 4, "name": "a", "value": 6}]

    def test_falls_back_to_value(self):
        command = _command(_option("a", choices=[commandeer.Choice(name="five", value="5")]))

        result = commandeer.encode(command, ["5"], CONTEXT)

        assert result
        assert result["data"]["options"] == [{"type": 3, "name": "a", "value": "5"}]

    def test_falls_back_to_numeric_value(self):
        command = _command(_option("a", hikari.OptionType.FLOAT, choices=[commandeer.Choice(name="half", value=0.5)]))

        result = commandeer.encode(command, ["0.50"], CONTEXT)

        assert result
        assert result["data"]["options"] == [{"type": 10, "name": "a", "value": 0.5}]

    def test_prefers_name_over_value(self):
        choices = [commandeer.Choice(name="1", value="2"), commandeer.Choice(name="2", value="1")]
        command = _command(_option("a", choices=choices))

        result = commandeer.encode(command, ["1"], CONTEXT)

        assert result
        assert result["data"]["options"][0]["value"] == "2"

    def test_uses_choice_value_verbatim(self):
        command = _command(_option("a", hikari.OptionType.BOOLEAN, choices=[commandeer.Choice(name="yes", value="y")]))

        result = commandeer.encode(command, ["yes"], CONTEXT)

        assert result
        assert result["data"]["options"][0]["value"] == "y"

    def test_when_no_choice_matches(self):
        choices = [commandeer.Choice(name="five", value="5"), commandeer.Choice(name="six", value="6")]
        command = _command(_option("a", choices=choices))

        with pytest.raises(commandeer.InvalidChoiceError) as exc:
            commandeer.encode(command, ["seven"], CONTEXT)

        assert exc.value.parameter == "a"
        assert exc.value.choices == tuple(choices)
        assert exc.value.message == (
            "Invalid option: 'seven' is not a valid choice for 'a'\n"
            "List of choices:\n"
            "#1 Name: five Value: 5\n"
            "#2 Name: six Value: 6"
        )


class TestEncodeSubCommands:
    def test(self):
        result = commandeer.encode(_role_command(), ["add", "12345"], CONTEXT)

        assert result
        assert result["data"]["name"] == "role"
        assert result["data"]["options"] == [
            {"type": 1, "name": "add", "options": [{"type": 3, "name": "role", "value": "12345"}]}
        ]

    def test_when_unknown_sub_command(self):
        with pytest.raises(commandeer.UnknownSubCommandError, match="Unknown sub-command 'bogus'") as exc:
            commandeer.encode(_role_command(), ["bogus", "12345"], CONTEXT)

        assert exc.value.token == "bogus"

    def test_when_sub_command_missing(self):
        with pytest.raises(
            commandeer.UnknownSubCommandError, match="Missing sub-command, expected one of 'add', 'remove'"
        ) as exc:
            commandeer.encode(_role_command(), [], CONTEXT)

        assert exc.value.token is None

    def test_when_sub_command_token_not_a_string(self):
        with pytest.raises(commandeer.InvalidTokenError) as exc:
            commandeer.encode(_role_command(), [1, "2"], CONTEXT)  # type: ignore

        assert exc.value.index == 0

    def test_when_sub_command_required_option_missing(self):
        with pytest.raises(commandeer.MissingRequiredError, match="Missing required value for option 'role'"):
            commandeer.encode(_role_command(), ["remove"], CONTEXT)

    def test_when_sub_command_token_not_a_string_after_routing(self):
        with pytest.raises(commandeer.InvalidTokenError) as exc:
            commandeer.encode(_role_command(), ["add", "1", 2], CONTEXT)  # type: ignore

        assert exc.value.parameter == "reason"
        assert exc.value.index == 2

    def test_sub_command_group(self):
        command = _command(
            _option(
                "colour",
                hikari.OptionType.SUB_COMMAND_GROUP,
                options=[
                    _option(
                        "set",
                        hikari.OptionType.SUB_COMMAND,
                        options=[_option("hex", required=True), _option("bold", hikari.OptionType.BOOLEAN)],
                    ),
                    _option("reset", hikari.OptionType.SUB_COMMAND),
                ],
            ),
            _option("show", hikari.OptionType.SUB_COMMAND),
        )

        result = commandeer.encode(command, ["colour", "set", "#fff", "yes"], CONTEXT)

        assert result
        assert result["data"]["options"] == [
            {
                "type": 2,
                "name": "colour",
                "options": [
                    {
                        "type": 1,
                        "name": "set",
                        "options": [
                            {"type": 3, "name": "hex", "value": "#fff"},
                            {"type": 5, "name": "bold", "value": True},
                        ],
                    }
                ],
            }
        ]

    def test_sub_command_without_options(self):
        command = _command(_option("show", hikari.OptionType.SUB_COMMAND))

        result = commandeer.encode(command, ["show", "ignored"], CONTEXT)

        assert result
        assert result["data"]["options"] == [{"type": 1, "name": "show", "options": []}]

    def test_when_sub_command_group_missing_sub_command(self):
        command = _command(
            _option(
                "colour",
                hikari.OptionType.SUB_COMMAND_GROUP,
                options=[_option("reset", hikari.OptionType.SUB_COMMAND)],
            )
        )

        with pytest.raises(commandeer.UnknownSubCommandError, match="Missing sub-command, expected one of 'reset'"):
            commandeer.encode(command, ["colour"], CONTEXT)


class TestEncodeContextMenu:
    def test_for_user_command(self):
        command = _command(type=hikari.CommandType.USER, name="Hug")
        user = mock.Mock(hikari.PartialUser, id=hikari.Snowflake(7654))

        result = commandeer.encode_context_menu(command, user, CONTEXT)

        assert result == {
            "type": 2,
            "application_id": "3333",
            "guild_id": "111",
            "channel_id": "222",
            "session_id": "sesh",
            "data": {"version": "5555", "id": "4444", "name": "Hug", "type": 2, "target_id": "7654"},
        }

    def test_for_user_command_with_message_target(self):
        command = _command(type=hikari.CommandType.USER)
        message = mock.Mock(hikari.PartialMessage, id=hikari.Snowflake(1), author=mock.Mock(id=hikari.Snowflake(98)))

        result = commandeer.encode_context_menu(command, message, CONTEXT)

        assert result
        assert result["data"]["target_id"] == "98"

    def test_for_user_command_with_authorless_message_target(self):
        command = _command(type=hikari.CommandType.USER)
        message = mock.Mock(hikari.PartialMessage, author=hikari.UNDEFINED)

        with pytest.raises(commandeer.ShapeError, match="Cannot target the author of a message with no known author"):
            commandeer.encode_context_menu(command, message, CONTEXT)

    def test_for_message_command(self):
        command = _command(type=hikari.CommandType.MESSAGE)
        message = mock.Mock(hikari.PartialMessage, id=hikari.Snowflake(321), author=mock.Mock(id=hikari.Snowflake(98)))

        result = commandeer.encode_context_menu(command, message, CONTEXT)

        assert result
        assert result["data"]["target_id"] == "321"
        assert result["data"]["type"] == 3
        assert "options" not in result["data"]

    @pytest.mark.parametrize("command_type", [hikari.CommandType.USER, hikari.CommandType.MESSAGE])
    @pytest.mark.parametrize("target", [123, "123", hikari.Snowflake(123)])
    def test_with_snowflake_target(self, command_type: hikari.CommandType, target: hikari.Snowflakeish):
        result = commandeer.encode_context_menu(_command(type=command_type), target, CONTEXT)

        assert result
        assert result["data"]["target_id"] == "123"

    def test_for_message_command_with_user_target(self):
        command = _command(type=hikari.CommandType.MESSAGE)

        with pytest.raises(commandeer.ShapeError, match="Message commands must target a message"):
            commandeer.encode_context_menu(command, mock.Mock(hikari.PartialUser), CONTEXT)

    @pytest.mark.parametrize("command_type", [hikari.CommandType.SLASH, hikari.UNDEFINED])
    def test_for_chat_input_command(self, command_type: typing.Any):
        assert commandeer.encode_context_menu(_command(type=command_type), 123, CONTEXT) is None
