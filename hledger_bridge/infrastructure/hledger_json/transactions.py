"""Parser for ``hledger print`` JSON output."""

from hledger_bridge.domain.errors import ReportParseError
from hledger_bridge.domain.models import (
    BalanceAssertion,
    PrintPosting,
    PrintReport,
    PrintTransaction,
    SourcePosition,
)

from .amounts import parse_print_amount, parse_print_amounts
from .fields import (
    as_list,
    get_bool,
    get_int,
    get_optional_str,
    get_str,
    parse_tags,
    require_object,
)


def parse_source_position(value) -> SourcePosition | None:
    if not isinstance(value, dict):
        return None
    return SourcePosition(
        line=get_int(value, "sourceLine"),
        column=get_int(value, "sourceColumn"),
        file=get_str(value, "sourceName"),
    )


def parse_balance_assertion(value) -> BalanceAssertion | None:
    """Parse ``pbalanceassertion``; null or amount-less assertions give None."""
    if not isinstance(value, dict):
        return None
    amount_value = value.get("baamount")
    if not isinstance(amount_value, dict):
        return None
    return BalanceAssertion(
        amount=parse_print_amount(amount_value),
        inclusive=get_bool(value, "bainclusive"),
        total=get_bool(value, "batotal"),
        position=parse_source_position(value.get("baposition")) or SourcePosition(),
    )


def _require_str(obj: dict, key: str, what: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise ReportParseError(f"Missing {key} in {what}")
    return value


def parse_posting(value) -> PrintPosting:
    """Parse a posting object, including its nested original posting.

    Raises:
        ReportParseError: When the posting is not an object or has no
            ``paccount`` string.
    """
    obj = require_object(value, "posting")
    original = obj.get("poriginal")
    return PrintPosting(
        account=_require_str(obj, "paccount", "posting"),
        amounts=parse_print_amounts(obj.get("pamount")),
        status=get_str(obj, "pstatus", "Unmarked"),
        comment=get_str(obj, "pcomment"),
        tags=parse_tags(obj.get("ptags")),
        posting_type=get_str(obj, "ptype", "RegularPosting"),
        date=get_optional_str(obj, "pdate"),
        date2=get_optional_str(obj, "pdate2"),
        balance_assertion=parse_balance_assertion(obj.get("pbalanceassertion")),
        original=parse_posting(original) if isinstance(original, dict) else None,
        transaction_index=get_str(obj, "ptransaction_"),
    )


def parse_transaction(value) -> PrintTransaction:
    """Parse a transaction object.

    Raises:
        ReportParseError: When the transaction is not an object, has no
            ``tdate`` string, or holds an invalid posting.
    """
    obj = require_object(value, "transaction")
    positions = (
        parse_source_position(item) for item in as_list(obj.get("tsourcepos"))
    )
    return PrintTransaction(
        date=_require_str(obj, "tdate", "transaction"),
        index=get_int(obj, "tindex"),
        date2=get_optional_str(obj, "tdate2"),
        status=get_str(obj, "tstatus", "Unmarked"),
        code=get_str(obj, "tcode"),
        description=get_str(obj, "tdescription"),
        comment=get_str(obj, "tcomment"),
        tags=parse_tags(obj.get("ttags")),
        postings=[parse_posting(item) for item in as_list(obj.get("tpostings"))],
        preceding_comment=get_str(obj, "tprecedingcomment"),
        source_positions=[pos for pos in positions if pos is not None],
    )


def parse_print_report(value) -> PrintReport:
    """Parse the top-level array of transactions.

    Raises:
        ReportParseError: When the document is not an array.
    """
    if not isinstance(value, list):
        raise ReportParseError("Expected array for print output")
    return [parse_transaction(item) for item in value]


__all__ = [
    "parse_source_position",
    "parse_balance_assertion",
    "parse_posting",
    "parse_transaction",
    "parse_print_report",
]
