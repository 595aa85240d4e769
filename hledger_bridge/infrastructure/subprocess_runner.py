"""Run the hledger executable and classify process-level failures."""

import json
import subprocess
import time
from decimal import Decimal

from hledger_bridge.domain.errors import (
    CommandFailedError,
    ExecutableNotFoundError,
    HledgerIOError,
    InvalidUtf8Error,
    JsonDecodeError,
)
from hledger_bridge.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def decode_json_output(text: str):
    """Decode hledger's JSON stdout, keeping floats as ``Decimal``.

    Args:
        text: Decoded stdout.

    Returns:
        Any: The JSON document.

    Raises:
        JsonDecodeError: When the output is not a JSON document.
    """
    try:
        return json.loads(text, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise JsonDecodeError(f"Invalid JSON output: {exc}") from exc


class SubprocessCommandRunner:
    """Command runner spawning one hledger process per call."""

    def __init__(
        self,
        executable: str = "hledger",
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the runner.

        Args:
            executable: hledger command name or path.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger receiving one line per invocation.
        """
        self._executable = executable
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    @property
    def executable(self) -> str:
        return self._executable

    def build_argv(self, args: list[str], journal_file: str | None = None) -> list[str]:
        """Return the full argv, ``-f JOURNAL`` placed before the subcommand."""
        argv = [self._executable]
        if journal_file is not None:
            argv.extend(["-f", str(journal_file)])
        argv.extend(args)
        return argv

    def run(self, args: list[str], journal_file: str | None = None) -> str:
        """Execute hledger and return its stdout.

        Args:
            args: Subcommand and flags, as produced by the options compiler.
            journal_file: Optional journal passed with ``-f``.

        Returns:
            str: Decoded stdout of a successful run.

        Raises:
            ExecutableNotFoundError: When the executable cannot be found.
            HledgerIOError: When the process cannot be started.
            CommandFailedError: When hledger exits with a non-zero status.
            InvalidUtf8Error: When stdout is not valid UTF-8.
        """
        argv = self.build_argv(args, journal_file)
        started = time.perf_counter()
        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                stdin=subprocess.DEVNULL,
                check=False,
            )
        except FileNotFoundError as exc:
            self._logger.error(f"hledger executable not found: {self._executable}")
            raise ExecutableNotFoundError(self._executable) from exc
        except OSError as exc:
            self._logger.error(f"Failed to start hledger: {exc}")
            raise HledgerIOError(f"Failed to start hledger: {exc}") from exc

        elapsed_ms = (time.perf_counter() - started) * 1000
        self._usage_logger.info(
            f"argv={argv} exit={completed.returncode} duration_ms={elapsed_ms:.1f}"
        )

        if completed.returncode != 0:
            stderr = (completed.stderr or b"").decode("utf-8", errors="replace")
            self._logger.error(
                f"hledger exited with code {completed.returncode}: {stderr.strip()}"
            )
            raise CommandFailedError(completed.returncode, stderr)

        try:
            return (completed.stdout or b"").decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidUtf8Error(f"hledger output is not valid UTF-8: {exc}") from exc


__all__ = ["SubprocessCommandRunner", "decode_json_output"]
