"""Client-side search, status filter and sort over the currently loaded page"""

import locale
from typing import Iterable, List
from payment_console.domain.models import FilterSpec, Payment, SortKey


def matches_search(payment: Payment, search: str) -> bool:
    """Case-insensitive substring match on name, id, masked card number or ZIP"""
    if not search:
        return True

    needle = search.casefold()
    return any(
        needle in value.casefold()
        for value in (
            payment.full_name,
            payment.id,
            payment.masked_card_number,
            payment.zip_code,
        )
    )


def matches_status(payment: Payment, spec: FilterSpec) -> bool:
    return spec.status is None or payment.status == spec.status


def _name_key(payment: Payment):
    name = payment.full_name
    return (locale.strxfrm(name.casefold()), name)


def sort_payments(payments: Iterable[Payment], sort: SortKey) -> List[Payment]:
    """Stable sort into a new list; the input is left untouched"""
    if sort is SortKey.DATE_DESC:
        return sorted(payments, key=lambda p: p.created_at, reverse=True)
    if sort is SortKey.DATE_ASC:
        return sorted(payments, key=lambda p: p.created_at)
    if sort is SortKey.NAME_DESC:
        return sorted(payments, key=_name_key, reverse=True)
    return sorted(payments, key=_name_key)


def apply(records: Iterable[Payment], spec: FilterSpec) -> List[Payment]:
    """
    Derive the display list for one loaded page.

    Only the records already in memory are considered: a payment on another
    page never shows up here no matter how the filters are set.

    Args:
        records: Payments of the current page, in gateway order
        spec: Search text, status filter and sort order

    Returns:
        New list of the payments passing both predicates, sorted per spec.sort
    """
    included = [
        payment
        for payment in records
        if matches_search(payment, spec.search) and matches_status(payment, spec)
    ]
    return sort_payments(included, spec.sort)


def summary_text(count: int, total_items: int, spec: FilterSpec) -> str:
    """Results line under the list"""
    if spec.is_active:
        return f"Showing {count} of {total_items} payments"
    return f"Total: {total_items} payments"
