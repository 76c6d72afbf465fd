"""Codec error types. Contract violations are raised; malformed words never are."""


class InvalidArgument(ValueError):
    """Raised when a required argument (charset, text) is absent."""

    def __init__(self, argument: str):
        super().__init__(f"Argument {argument!r} must not be None")
        self.argument = argument


class UnknownCharset(LookupError):
    """Raised by a charset provider when a charset name cannot be resolved."""

    def __init__(self, name: str, cause: Exception | None = None):
        super().__init__(f"Unknown charset: {name!r}")
        self.name = name
        self.cause = cause
