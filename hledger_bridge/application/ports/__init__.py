"""Application ports package."""

from .command_runner import CommandRunnerPort
from .report_repository import ReportRepositoryPort

__all__ = ["CommandRunnerPort", "ReportRepositoryPort"]
