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
"""Client-side reconstruction, comparison and invocation of application commands.

Examples
--------
A command fetched from the server can be turned into an interaction body
without running the issuing application's own validation code:

```py
command = commandeer.command_to_model(raw_command)
context = commandeer.InvocationContext.from_message(message, session_id=session_id)

body = commandeer.encode(command, ["add", "<@&1234567890>"], context)
```

And a locally declared command can be checked against the registered one to
skip an unnecessary re-declaration:

```py
if not commandeer.commands_equal(registered, {"name": "role", "options": [...]}):
    ...
```
"""
from __future__ import annotations

__all__: list[str] = [
    "Choice",
    "Command",
    "CommandeerError",
    "ConversionError",
    "InvalidChoiceError",
    "InvalidTokenError",
    "InvocationContext",
    "MissingRequiredError",
    "Option",
    "PreconditionError",
    "ShapeError",
    "UnknownSubCommandError",
    "all_commands_equal",
    "command_to_model",
    "command_to_wire",
    "commands_equal",
    "comparison",
    "conversion",
    "encode",
    "encode_context_menu",
    "errors",
    "invoking",
    "options_equal",
    "schema",
    "to_model",
    "to_wire",
    "transcoding",
]

from . import comparison
from . import conversion
from . import errors
from . import invoking
from . import schema
from . import transcoding
from .comparison import all_commands_equal
from .comparison import commands_equal
from .comparison import options_equal
from .errors import CommandeerError
from .errors import ConversionError
from .errors import InvalidChoiceError
from .errors import InvalidTokenError
from .errors import MissingRequiredError
from .errors import PreconditionError
from .errors import ShapeError
from .errors import UnknownSubCommandError
from .invoking import encode
from .invoking import encode_context_menu
from .schema import Choice
from .schema import Command
from .schema import InvocationContext
from .schema import Option
from .transcoding import command_to_model
from .transcoding import command_to_wire
from .transcoding import to_model
from .transcoding import to_wire
