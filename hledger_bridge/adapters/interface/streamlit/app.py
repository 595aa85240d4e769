"""Streamlit viewer for hledger reports."""

from collections.abc import Sequence
from datetime import date

import streamlit as st
import altair as alt

from hledger_bridge.application.use_cases import (
    GetAccountsUseCase,
    GetBalanceSheetUseCase,
    GetBalanceUseCase,
    GetDashboardSummaryUseCase,
    GetIncomeStatementUseCase,
    GetPrintUseCase,
    GetVerificationUseCase,
)
from hledger_bridge.domain.errors import (
    CommandFailedError,
    HledgerError,
    ReportParseError,
)
from hledger_bridge.domain.models import (
    Amount,
    BalanceOptions,
    BalanceReport,
    BalanceSheetOptions,
    CompoundReport,
    DashboardSummary,
    IncomeStatementOptions,
    PrintOptions,
    PrintReport,
    SimpleBalance,
    VerificationReport,
)
from hledger_bridge.domain.services.finance import (
    latest_period_amounts,
    nonzero_amounts,
)
from hledger_bridge.domain.services.periods import (
    DateRangePreset,
    preset_date_range,
)
from hledger_bridge.infrastructure.container import build_report_repository
from hledger_bridge.infrastructure.settings import HledgerSettings

PAGES = [
    "Dashboard",
    "Accounts",
    "Balance",
    "Balance sheet",
    "Income statement",
    "Print",
    "Verification",
]
DATE_RANGES = {
    "All dates": None,
    "This month": DateRangePreset.THIS_MONTH,
    "Last month": DateRangePreset.LAST_MONTH,
    "This year": DateRangePreset.THIS_YEAR,
    "Last year": DateRangePreset.LAST_YEAR,
}


def _repository():
    return build_report_repository(HledgerSettings.from_env())


def _fetch_dashboard_summary(journal_file: str | None) -> DashboardSummary:
    """Fetch the dashboard summary for the journal."""
    use_case = GetDashboardSummaryUseCase(_repository())
    return use_case.execute(journal_file)


@st.cache_data(show_spinner=False)
def _load_dashboard_summary(journal_file: str | None) -> DashboardSummary:
    """Cached wrapper around _fetch_dashboard_summary."""
    return _fetch_dashboard_summary(journal_file)


def _fetch_accounts(journal_file: str | None) -> Sequence[str]:
    """Fetch account names using the hledger repository."""
    return GetAccountsUseCase(_repository()).execute(journal_file)


@st.cache_data(show_spinner=False)
def _load_accounts(journal_file: str | None) -> Sequence[str]:
    """Cached wrapper around _fetch_accounts for Streamlit sessions."""
    return _fetch_accounts(journal_file)


def _fetch_balance(
    journal_file: str | None,
    options: BalanceOptions,
) -> BalanceReport:
    return GetBalanceUseCase(_repository()).execute(journal_file, options)


def _fetch_balance_sheet(
    journal_file: str | None,
    options: BalanceSheetOptions,
) -> CompoundReport:
    return GetBalanceSheetUseCase(_repository()).execute(journal_file, options)


def _fetch_income_statement(
    journal_file: str | None,
    options: IncomeStatementOptions,
) -> CompoundReport:
    return GetIncomeStatementUseCase(_repository()).execute(
        journal_file, options
    )


def _fetch_print(journal_file: str | None, options: PrintOptions) -> PrintReport:
    return GetPrintUseCase(_repository()).execute(journal_file, options)


def _fetch_verification(journal_file: str | None) -> VerificationReport:
    return GetVerificationUseCase(_repository()).execute(journal_file)


def _date_bounds(
    label: str,
    today: date | None = None,
) -> tuple[str | None, str | None]:
    """Return ISO ``(begin, end)`` for a date range label.

    Args:
        label: Key of ``DATE_RANGES``.
        today: Reference date, defaults to the current date.

    Returns:
        tuple[str | None, str | None]: Exclusive-end bounds, or
        ``(None, None)`` when no range is selected.
    """
    preset = DATE_RANGES.get(label)
    if preset is None:
        return None, None
    start, end = preset_date_range(preset, today or date.today())
    return start.isoformat(), end.isoformat()


def _format_amount(amount: Amount) -> str:
    """Format an amount with its commodity for display."""
    if not amount.commodity:
        return f"{amount.quantity:,}"
    return f"{amount.commodity} {amount.quantity:,}"


def _format_amounts(amounts: Sequence[Amount]) -> str:
    """Format a multi-commodity amount list, ``0`` when empty."""
    shown = nonzero_amounts(amounts)
    if not shown:
        return "0"
    return ", ".join(_format_amount(amount) for amount in shown)


def _month_label(iso_date: str) -> str:
    return date.fromisoformat(iso_date).strftime("%B %Y")


def _error_message(exc: HledgerError) -> str:
    if isinstance(exc, CommandFailedError):
        return f"hledger failed (exit code {exc.code}): {exc.stderr.strip()}"
    if isinstance(exc, ReportParseError):
        return f"Unexpected hledger output: {exc.reason}"
    return str(exc)


def _balance_table(report: BalanceReport) -> list[dict[str, str]]:
    """Return display rows for either balance report shape."""
    if isinstance(report, SimpleBalance):
        return [
            {
                "Account": account.name,
                "Balance": _format_amounts(account.amounts),
            }
            for account in report.accounts
        ]
    rows = []
    for row in report.rows:
        data = {"Account": row.account}
        for period, amounts in zip(report.dates, row.amounts):
            data[period.start] = _format_amounts(amounts)
        rows.append(data)
    return rows


def _transactions_table(transactions: PrintReport) -> list[dict[str, str]]:
    """Return one display row per posting."""
    return [
        {
            "Date": txn.date,
            "Description": txn.description,
            "Account": posting.account,
            "Amount": _format_amounts([a.as_amount() for a in posting.amounts]),
        }
        for txn in transactions
        for posting in txn.postings
    ]


def _prepare_subreport_chart_data(
    report: CompoundReport,
) -> list[dict[str, str | float]]:
    """Prepare bar chart data of section totals for the latest period.

    Args:
        report: Balance sheet, income statement or cashflow report.

    Returns:
        Altair-ready rows, one per section and commodity with a
        non-zero total.
    """
    data: list[dict[str, str | float]] = []
    for subreport in report.subreports:
        for amount in nonzero_amounts(latest_period_amounts(subreport.totals)):
            data.append(
                {
                    "section": subreport.name,
                    "commodity": amount.commodity,
                    "amount": float(amount.quantity),
                    "amount_label": _format_amount(amount),
                }
            )
    return data


def _render_subreport_chart(report: CompoundReport, title: str) -> None:
    """Render section totals as a bar chart."""
    data = _prepare_subreport_chart_data(report)
    if not data:
        st.info("No amounts available for the chart.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("section:N", title=None),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color("commodity:N"),
        xOffset="commodity:N",
        tooltip=[
            alt.Tooltip("section:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _render_compound_report(report: CompoundReport) -> None:
    """Render the section chart followed by one table per section."""
    _render_subreport_chart(report, report.title)
    for subreport in report.subreports:
        st.caption(
            f"{subreport.name}: "
            f"{_format_amounts(latest_period_amounts(subreport.totals))}"
        )
        st.dataframe(
            [
                {
                    "Account": row.account,
                    "Amount": _format_amounts(latest_period_amounts(row)),
                }
                for row in subreport.rows
            ],
            width="stretch",
            hide_index=True,
        )


def _render_dashboard(journal_file: str | None) -> None:
    summary = _load_dashboard_summary(journal_file)
    net_worth_col, expenses_col, previous_col = st.columns(3)
    net_worth_col.metric("Net Worth", _format_amounts(summary.net_worth))
    expenses_col.metric(
        f"Expenses {_month_label(summary.period_start)}",
        _format_amounts(summary.period_expenses),
    )
    previous_col.metric(
        f"Expenses {_month_label(summary.previous_period_start)}",
        _format_amounts(summary.previous_period_expenses),
    )


def _render_accounts(accounts: Sequence[str]) -> None:
    """Render the accounts table with light filtering."""
    st.subheader("Accounts")
    query = st.text_input("Search by name", placeholder="Type to filter")
    query_lower = query.strip().lower()
    filtered = [
        name for name in accounts
        if not query_lower or query_lower in name.lower()
    ]
    st.caption(f"{len(filtered)} accounts shown")
    st.dataframe(
        [{"Account": name} for name in filtered],
        width="stretch",
        hide_index=True,
    )


def _render_balance(journal_file: str | None, begin, end) -> None:
    monthly = st.sidebar.checkbox("Monthly", value=False)
    depth = st.sidebar.number_input("Depth", min_value=0, value=0, step=1)
    options = BalanceOptions(depth=int(depth) or None).between(begin, end)
    if monthly:
        options = options.monthly()
    report = _fetch_balance(journal_file, options)
    st.subheader("Balance")
    st.dataframe(_balance_table(report), width="stretch", hide_index=True)


def _render_balance_sheet(journal_file: str | None, begin, end) -> None:
    tree = st.sidebar.checkbox("Tree", value=False)
    options = BalanceSheetOptions().between(begin, end)
    if tree:
        options = options.tree()
    _render_compound_report(_fetch_balance_sheet(journal_file, options))


def _render_income_statement(journal_file: str | None, begin, end) -> None:
    options = IncomeStatementOptions().between(begin, end)
    _render_compound_report(_fetch_income_statement(journal_file, options))


def _render_print(journal_file: str | None, begin, end) -> None:
    query = st.text_input("Query", placeholder="e.g. expenses:food")
    options = PrintOptions().between(begin, end)
    if query:
        options = options.query(*query.split())
    transactions = _fetch_print(journal_file, options)
    st.caption(f"{len(transactions)} transactions")
    st.dataframe(_transactions_table(transactions), width="stretch", hide_index=True)


def _render_verification(journal_file: str | None) -> None:
    """Render temporary balances and uncategorized transactions."""
    report = _fetch_verification(journal_file)
    st.subheader("Temporary Accounts")
    st.caption("Balances in temporary accounts that should be zero")
    if report.temp_balances:
        st.dataframe(
            [
                {
                    "Account": account.name,
                    "Balance": _format_amounts(account.amounts),
                }
                for account in report.temp_balances
            ],
            width="stretch",
            hide_index=True,
        )
    else:
        st.success("All temporary accounts are balanced.")
    st.subheader("Uncategorized Transactions")
    st.caption("Transactions that need to be categorized")
    if report.uncategorized:
        st.dataframe(
            _transactions_table(report.uncategorized),
            width="stretch",
            hide_index=True,
        )
    else:
        st.success("No uncategorized transactions.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="hledger Reports", layout="wide")
    st.title("hledger Reports")

    default_journal = HledgerSettings.from_env().journal_file
    journal_input = st.sidebar.text_input(
        "Journal file",
        value=str(default_journal) if default_journal else "",
    )
    journal_file = journal_input.strip() or None
    page = st.sidebar.selectbox("Page", PAGES)
    begin, end = _date_bounds(
        st.sidebar.selectbox("Date range", list(DATE_RANGES))
    )

    try:
        if page == "Dashboard":
            _render_dashboard(journal_file)
        elif page == "Accounts":
            accounts = _load_accounts(journal_file)
            if not accounts:
                st.warning("No accounts found in the journal.")
                return
            _render_accounts(accounts)
        elif page == "Balance":
            _render_balance(journal_file, begin, end)
        elif page == "Balance sheet":
            _render_balance_sheet(journal_file, begin, end)
        elif page == "Income statement":
            _render_income_statement(journal_file, begin, end)
        elif page == "Verification":
            _render_verification(journal_file)
        else:
            _render_print(journal_file, begin, end)
    except HledgerError as exc:
        st.error(_error_message(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
