"""Commands produced by the parser and consumed by the executor.

Each command carries a ``command`` tag so the executor can dispatch on it.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from galaxy_db.models import AnyBody, BodyKind, Galaxy


class BaseCommand(BaseModel):
    """Base class for all commands."""

    command: str = Field(..., description="Command type discriminator")

    model_config = {"frozen": True}


class NoOp(BaseCommand):
    """Blank input line."""

    command: Literal["noop"] = "noop"


class ShowError(BaseCommand):
    """A line that could not be turned into a command."""

    command: Literal["show_error"] = "show_error"
    message: str = Field(..., description="User facing error message")


class AddBody(BaseCommand):
    command: Literal["add"] = "add"
    body: AnyBody = Field(..., description="Body to store")
    parent: Optional[AnyBody] = Field(None, description="Stored parent, if any")


class ListKind(BaseCommand):
    command: Literal["list"] = "list"
    kind: BodyKind
    label: str = Field(..., description="Word the user typed, for display")


class Stats(BaseCommand):
    command: Literal["stats"] = "stats"


class PrintGalaxy(BaseCommand):
    command: Literal["print"] = "print"
    galaxy: Galaxy


class Exit(BaseCommand):
    """Terminates the console loop."""

    command: Literal["exit"] = "exit"


Command = Annotated[
    Union[NoOp, ShowError, AddBody, ListKind, Stats, PrintGalaxy, Exit],
    Field(discriminator="command"),
]
