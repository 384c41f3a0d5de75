"""Exceptions raised by the galaxy catalog and its command parser."""

from galaxy_db.models import BodyKind


class GalaxyDBError(Exception):
    """Base class for catalog errors."""

    pass


class DuplicateBodyError(GalaxyDBError):
    """Raised when a body's name is already taken within its kind.

    Attributes:
        kind: Kind of the rejected body.
        name: The duplicated name.
    """

    def __init__(self, kind: BodyKind, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.display_name} {name} already exists.")


class UnknownBodyError(GalaxyDBError):
    """Raised when a parent body is not stored in the catalog."""

    def __init__(self, kind: BodyKind, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.display_name} {name} is not in the catalog")


class CommandSyntaxError(GalaxyDBError):
    """Raised by the parser when a line does not form a valid command.

    The message is user facing and is shown as-is.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
