"""Tests for the print report parser."""

from decimal import Decimal

import pytest

from hledger_bridge.domain.errors import ReportParseError
from hledger_bridge.domain.models import SourcePosition
from hledger_bridge.infrastructure.hledger_json.transactions import (
    parse_print_report,
)


def _amount(mantissa, commodity="$"):
    return {
        "acommodity": commodity,
        "aquantity": {"decimalMantissa": mantissa, "decimalPlaces": 2},
        "aprice": None,
        "astyle": {"ascommodityside": "L", "asprecision": 2},
    }


def _transaction():
    return {
        "tindex": 1,
        "tdate": "2024-01-05",
        "tdate2": None,
        "tstatus": "Cleared",
        "tcode": "42",
        "tdescription": "Groceries",
        "tcomment": "weekly\n",
        "tprecedingcomment": "",
        "ttags": [["trip", "paris"], ["trip", "lyon"]],
        "tsourcepos": [
            {"sourceName": "main.journal", "sourceLine": 10, "sourceColumn": 1},
            {"sourceName": "main.journal", "sourceLine": 13, "sourceColumn": 1},
        ],
        "tpostings": [
            {
                "paccount": "expenses:food",
                "pamount": [_amount(4550)],
                "pstatus": "Unmarked",
                "pcomment": "",
                "ptype": "RegularPosting",
                "pdate": None,
                "pdate2": None,
                "ptags": [],
                "pbalanceassertion": None,
                "poriginal": None,
                "ptransaction_": "1",
            },
            {
                "paccount": "assets:bank",
                "pamount": [_amount(-4550)],
                "pbalanceassertion": {
                    "baamount": _amount(100000),
                    "bainclusive": False,
                    "batotal": True,
                    "baposition": {
                        "sourceName": "main.journal",
                        "sourceLine": 12,
                        "sourceColumn": 5,
                    },
                },
                "poriginal": {"paccount": "assets:checking", "pamount": []},
            },
        ],
    }


def test_transaction_fields():
    [txn] = parse_print_report([_transaction()])

    assert txn.index == 1
    assert txn.date == "2024-01-05"
    assert txn.date2 is None
    assert txn.status == "Cleared"
    assert txn.code == "42"
    assert txn.description == "Groceries"
    assert txn.tags == [("trip", "paris"), ("trip", "lyon")]
    assert txn.source_positions[0] == SourcePosition(line=10, column=1, file="main.journal")
    assert len(txn.postings) == 2


def test_posting_fields_and_defaults():
    [txn] = parse_print_report([_transaction()])
    food, bank = txn.postings

    assert food.amounts[0].quantity == Decimal("45.50")
    assert food.amounts[0].price is None
    assert food.transaction_index == "1"
    assert food.balance_assertion is None
    assert food.original is None

    assert bank.status == "Unmarked"
    assert bank.posting_type == "RegularPosting"
    assert bank.comment == ""
    assert bank.balance_assertion.amount.quantity == Decimal("1000.00")
    assert bank.balance_assertion.total is True
    assert bank.balance_assertion.position.line == 12
    assert bank.original.account == "assets:checking"


def test_minimal_transaction_defaults():
    [txn] = parse_print_report([{"tdate": "2024-02-01"}])
    assert txn.status == "Unmarked"
    assert txn.description == ""
    assert txn.postings == []
    assert txn.source_positions == []


def test_empty_report():
    assert parse_print_report([]) == []


def test_date_is_required():
    document = _transaction()
    del document["tdate"]
    with pytest.raises(ReportParseError, match="tdate"):
        parse_print_report([document])


def test_account_is_required():
    document = _transaction()
    document["tpostings"][0]["paccount"] = 7
    with pytest.raises(ReportParseError, match="paccount"):
        parse_print_report([document])


def test_top_level_must_be_array():
    with pytest.raises(ReportParseError):
        parse_print_report({"tdate": "2024-01-01"})
