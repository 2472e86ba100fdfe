"""Filtering and sorting rules for the customer grid."""

import enum
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from customers.domain.domain import Customer, EDITABLE_FIELDS, format_date


class SearchCriteria(enum.Enum):
    NAME_AND_SURNAME = "name_and_surname"
    CERTIFICATE_NUMBER = "certificate_number"
    SEX = "sex"
    ADDRESS = "address"
    DATE_OF_BIRTH = "date_of_birth"
    PLACE_OF_BIRTH = "place_of_birth"
    DATE_OF_DEATH = "date_of_death"
    PLACE_OF_DEATH = "place_of_death"
    DEATH_CERTIFICATE_NUMBER = "death_certificate_number"
    ISSUE_DATE = "issue_date"
    ISSUED_BY = "issued_by"


class SortDirection(enum.Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def toggled(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


@dataclass(frozen=True)
class SortDescription:
    property_name: str
    direction: SortDirection = SortDirection.ASCENDING


SORTABLE_COLUMNS = ("id",) + EDITABLE_FIELDS


def next_sort(current: Optional[SortDescription], column: str) -> SortDescription:
    """
    Work out the sort after a click on a column header.

    Clicking the active column flips its direction; any other column
    starts ascending.
    """
    if column not in SORTABLE_COLUMNS:
        raise ValueError(f"Cannot sort by unknown column: {column}")

    if current is not None and current.property_name == column:
        return SortDescription(column, current.direction.toggled())
    return SortDescription(column, SortDirection.ASCENDING)


def _sort_key(value):
    # None sorts before any value when ascending
    if isinstance(value, str):
        return (value is not None, value.casefold())
    return (value is not None, value)


def sort_customers(customers: Iterable[Customer], sort: Optional[SortDescription]) -> List[Customer]:
    if sort is None:
        return list(customers)
    if sort.property_name not in SORTABLE_COLUMNS:
        raise ValueError(f"Cannot sort by unknown column: {sort.property_name}")
    return sorted(
        customers,
        key=lambda c: _sort_key(getattr(c, sort.property_name)),
        reverse=sort.direction is SortDirection.DESCENDING,
    )


def _searchable_text(customer: Customer, criteria: SearchCriteria) -> List[str]:
    value = getattr(customer, criteria.value)
    if isinstance(value, date):
        return [format_date(value), value.isoformat()]
    return [value or ""]


def matches(customer: Customer, text: str,
            criteria: SearchCriteria = SearchCriteria.NAME_AND_SURNAME) -> bool:
    """Case-insensitive substring match of the filter text against a customer."""
    if not text:
        return True
    needle = text.casefold()

    if criteria is SearchCriteria.NAME_AND_SURNAME:
        name = customer.name or ""
        surname = customer.surname or ""
        candidates = [name, surname, f"{name} {surname}", f"{surname} {name}"]
    else:
        candidates = _searchable_text(customer, criteria)

    return any(needle in candidate.casefold() for candidate in candidates)


def filter_customers(customers: Iterable[Customer], text: str,
                     criteria: SearchCriteria = SearchCriteria.NAME_AND_SURNAME) -> List[Customer]:
    return [c for c in customers if matches(c, text, criteria)]
