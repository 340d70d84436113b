"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class CommandError(InterfaceError):
    """Console input that is not a valid command."""

    pass
