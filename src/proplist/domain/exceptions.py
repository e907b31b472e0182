"""Domain exceptions."""


class ProplistError(Exception):
    """Base exception for proplist."""

    pass


class InvalidPropertyKey(ProplistError):
    """Property key cannot be used as a JSON object field name."""

    pass


class InvalidPropertyArgument(ProplistError):
    """Command-line argument is not a KEY=VALUE pair."""

    pass
