"""Application port for running the hledger executable."""

from typing import Protocol


class CommandRunnerPort(Protocol):
    """Port executing one hledger invocation."""

    def run(self, args: list[str], journal_file: str | None = None) -> str:
        """Run hledger with ``args`` and return its stdout."""


__all__ = ["CommandRunnerPort"]
