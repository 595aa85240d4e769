"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from hledger_bridge.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class HledgerSettings:
    """Settings for invoking the hledger executable.

    Attributes:
        executable: Command name or path of the hledger binary.
        journal_file: Default journal used when a call passes none.
    """

    executable: str = "hledger"
    journal_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "HledgerSettings":
        """Build settings from environment variables.

        ``HLEDGER_PATH`` overrides the executable and ``LEDGER_FILE``
        supplies the default journal, as hledger itself does.

        Returns:
            HledgerSettings: Settings sourced from environment variables.
        """
        executable = os.getenv("HLEDGER_PATH", "").strip() or "hledger"
        raw_journal = os.getenv("LEDGER_FILE", "").strip()
        journal_file = None
        if raw_journal:
            journal_file = cls._normalize_path(raw_journal, logger=get_app_logger())
        return cls(executable=executable, journal_file=journal_file)

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the journal path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute journal path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Journal file does not exist at {path}")
        return path

    def resolve_journal(self, journal_file: Path | str | None) -> str | None:
        """Return the journal for a call, preferring the explicit argument."""
        chosen = journal_file if journal_file is not None else self.journal_file
        return None if chosen is None else str(chosen)


__all__ = ["HledgerSettings"]
