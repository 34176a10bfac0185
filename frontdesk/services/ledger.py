"""Sales and expense ledgers behind the finance pages."""

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from datetime import date
from decimal import Decimal

from frontdesk.billing.engine import to_cents, to_decimal
from frontdesk.errors import ValidationError
from frontdesk.models.ledger import Expense, Sale

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class FinanceSummary:
    total_sales: Decimal
    total_expenses: Decimal
    net_revenue: Decimal


def _in_period(day: date, month: int | None, year: int | None) -> bool:
    return (month is None or day.month == month) and (year is None or day.year == year)


class SalesLedger:
    """Append-only list of sales."""

    def __init__(self, sales: Iterable[Sale] = ()) -> None:
        self._sales: list[Sale] = list(sales)

    def next_id(self) -> str:
        return f"S{len(self._sales) + 1:03d}"

    def record(self, sale: Sale) -> Sale:
        if to_decimal(sale.amount) < 0:
            raise ValidationError("Sale amount cannot be negative", field="amount")
        self._sales.append(sale)
        logger.info("Recorded sale %s for bill %s: %s", sale.id, sale.bill_number, sale.amount)
        return sale

    def entries(self) -> list[Sale]:
        return list(self._sales)

    def filter(
        self,
        search: str = "",
        on_date: date | None = None,
        month: int | None = None,
        year: int | None = None,
    ) -> list[Sale]:
        """Match ``search`` against guest, bill number, customer, or room number."""
        term = search.strip().lower()
        results = []
        for sale in self._sales:
            if term and not (
                term in sale.guest_name.lower()
                or term in sale.bill_number.lower()
                or term in sale.customer_name.lower()
                or term in str(sale.room_number)
            ):
                continue
            if on_date is not None and sale.date != on_date:
                continue
            if not _in_period(sale.date, month, year):
                continue
            results.append(sale)
        return results

    @staticmethod
    def total(sales: Iterable[Sale]) -> Decimal:
        return to_cents(sum((to_decimal(s.amount) for s in sales), ZERO))

    @staticmethod
    def rows(sales: Iterable[Sale]) -> list[dict]:
        """Tabular projection for export sinks."""
        return [asdict(s) for s in sales]


class ExpenseLedger:
    """Append-only list of expenses."""

    def __init__(self, expenses: Iterable[Expense] = ()) -> None:
        self._expenses: list[Expense] = list(expenses)

    def next_id(self) -> str:
        return f"E{len(self._expenses) + 1:03d}"

    def record(self, expense: Expense) -> Expense:
        if to_decimal(expense.amount) < 0:
            raise ValidationError("Expense amount cannot be negative", field="amount")
        if not expense.category.strip():
            raise ValidationError("Expense category is required", field="category")
        self._expenses.append(expense)
        logger.info("Recorded expense %s (%s): %s", expense.id, expense.category, expense.amount)
        return expense

    def entries(self) -> list[Expense]:
        return list(self._expenses)

    def categories(self) -> list[str]:
        return sorted({e.category for e in self._expenses})

    def filter(
        self,
        search: str = "",
        category: str | None = None,
        month: int | None = None,
        year: int | None = None,
    ) -> list[Expense]:
        """Match ``search`` against description, paid-by, or reference."""
        term = search.strip().lower()
        results = []
        for expense in self._expenses:
            if term and not (
                term in expense.description.lower()
                or term in expense.paid_by.lower()
                or term in expense.reference.lower()
            ):
                continue
            if category and category != "all" and expense.category != category:
                continue
            if not _in_period(expense.date, month, year):
                continue
            results.append(expense)
        return results

    @staticmethod
    def total(expenses: Iterable[Expense]) -> Decimal:
        return to_cents(sum((to_decimal(e.amount) for e in expenses), ZERO))

    @staticmethod
    def rows(expenses: Iterable[Expense]) -> list[dict]:
        return [asdict(e) for e in expenses]


def finance_summary(
    sales: SalesLedger,
    expenses: ExpenseLedger,
    month: int | None = None,
    year: int | None = None,
) -> FinanceSummary:
    """Sales minus expenses for a period (all time when month/year are omitted)."""
    total_sales = sales.total(sales.filter(month=month, year=year))
    total_expenses = expenses.total(expenses.filter(month=month, year=year))
    return FinanceSummary(
        total_sales=total_sales,
        total_expenses=total_expenses,
        net_revenue=total_sales - total_expenses,
    )
