"""Exception hierarchy for patternbook."""


class PatternbookError(Exception):
    """Base class for all patternbook errors."""


class PatternNotFoundError(PatternbookError, KeyError):
    """No pattern is registered under the requested name."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available or []
        message = f"Unknown pattern: {name!r}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class DuplicatePatternError(PatternbookError):
    """A pattern with the same name was already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Pattern already registered: {name!r}")


class DemoConstructionError(PatternbookError):
    """A demo factory raised while building the demo instance."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        super().__init__(f"Failed to construct demo {name!r}: {cause}")


class UnsupportedFormatError(PatternbookError):
    """The reporter was asked for an output format it does not know."""

    def __init__(self, output_format: str, supported: tuple[str, ...]) -> None:
        self.output_format = output_format
        super().__init__(
            f"Unsupported output format: {output_format!r}. "
            f"Choose one of: {', '.join(supported)}"
        )


class InvalidPatternError(PatternbookError, ValueError):
    """A pattern was registered with a blank name or an unknown category."""
