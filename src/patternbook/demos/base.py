"""Base class for pattern demos.

A demo is built fresh for every run. Subclasses implement ``scenario``
and write their output through ``emit``; ``run`` collects the lines.
"""


class Demo:
    """Abstract base for runnable pattern demos.

    Subclasses must implement ``scenario``.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def emit(self, line: str) -> None:
        """Record one line of demo output."""
        self._lines.append(line)

    def run(self) -> list[str]:
        """Run the canonical scenario and return the lines it produced."""
        self._lines = []
        self.scenario()
        return list(self._lines)

    def scenario(self) -> None:
        raise NotImplementedError
