"""Typed errors raised while invoking hledger or reading its output."""


class HledgerError(Exception):
    """Base class for every failure surfaced by the hledger adapter."""


class ExecutableNotFoundError(HledgerError):
    """The hledger executable could not be located."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"hledger executable not found: {executable}")
        self.executable = executable


class HledgerIOError(HledgerError):
    """The operating system failed to launch or read the process."""


class CommandFailedError(HledgerError):
    """hledger exited with a non-zero status.

    Attributes:
        code: Process exit code (negative when killed by a signal).
        stderr: Diagnostic text written by hledger, kept verbatim.
    """

    def __init__(self, code: int, stderr: str) -> None:
        super().__init__(
            f"hledger command failed with exit code {code}: {stderr}"
        )
        self.code = code
        self.stderr = stderr


class InvalidUtf8Error(HledgerError):
    """hledger wrote bytes that are not valid UTF-8."""


class JsonDecodeError(HledgerError):
    """hledger output is not a JSON document."""


class ReportParseError(HledgerError):
    """A JSON document does not match the expected report schema.

    Attributes:
        reason: Description naming the offending field or shape.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Parse error: {reason}")
        self.reason = reason


__all__ = [
    "HledgerError",
    "ExecutableNotFoundError",
    "HledgerIOError",
    "CommandFailedError",
    "InvalidUtf8Error",
    "JsonDecodeError",
    "ReportParseError",
]
