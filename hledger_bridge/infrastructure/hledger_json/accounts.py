"""Parser for ``hledger accounts`` output."""

from hledger_bridge.domain.errors import ReportParseError


def parse_accounts_output(output) -> list[str]:
    """Return account names from ``hledger accounts`` output.

    Args:
        output: Plain-text stdout, one account per line, or an already
            decoded JSON array of strings.

    Returns:
        list[str]: Trimmed, non-empty account names in output order.

    Raises:
        ReportParseError: When a JSON array holds non-string entries or
            the output has another type.
    """
    if isinstance(output, str):
        lines = output.splitlines()
    elif isinstance(output, list):
        if not all(isinstance(item, str) for item in output):
            raise ReportParseError("Expected array of account names")
        lines = output
    else:
        raise ReportParseError("Expected account names")
    return [line.strip() for line in lines if line.strip()]


__all__ = ["parse_accounts_output"]
