"""Unit tests for grid filtering and column sorting."""
from datetime import date

import pytest

from customers.domain.search import (
    SearchCriteria,
    SortDescription,
    SortDirection,
    filter_customers,
    matches,
    next_sort,
    sort_customers,
)


class TestFilterByName:
    """Default filter: substring of name, surname or either concatenation."""

    def test_empty_filter_matches_everything(self, customer_factory):
        assert matches(customer_factory(), "") is True

    @pytest.mark.parametrize("text", ["jan", "KOWAL", "n Kow", "jan kowalski", "Kowalski Jan", "ski j"])
    def test_matches_name_surname_and_both_orders(self, customer_factory, text):
        assert matches(customer_factory(name="Jan", surname="Kowalski"), text) is True

    @pytest.mark.parametrize("text", ["Nowak", "Jan  Kowalski", "Jan Nowak", "Warszawa"])
    def test_does_not_match_other_text(self, customer_factory, text):
        assert matches(customer_factory(name="Jan", surname="Kowalski"), text) is False

    def test_matching_is_case_insensitive_for_polish_letters(self, customer_factory):
        assert matches(customer_factory(name="Łucja", surname="Żak"), "łUCJA ŻAK") is True

    def test_filter_customers_keeps_order(self, sample_customers):
        result = filter_customers(sample_customers, "a")
        assert [c.id for c in result] == [1, 2, 3]

        result = filter_customers(sample_customers, "nowak anna")
        assert [c.id for c in result] == [2]


class TestFilterByCriteria:

    def test_text_field(self, sample_customers):
        result = filter_customers(sample_customers, "poznań", SearchCriteria.ADDRESS)
        assert [c.id for c in result] == [3]

    def test_certificate_number(self, sample_customers):
        result = filter_customers(sample_customers, "2023", SearchCriteria.CERTIFICATE_NUMBER)
        assert [c.id for c in result] == [3]

    def test_date_matches_display_and_iso_form(self, sample_customers):
        assert [c.id for c in filter_customers(sample_customers, "01.07.1950", SearchCriteria.DATE_OF_BIRTH)] == [2]
        assert [c.id for c in filter_customers(sample_customers, "1950-07", SearchCriteria.DATE_OF_BIRTH)] == [2]

    def test_missing_date_never_matches_non_empty_text(self, customer_factory):
        assert matches(customer_factory(date_of_birth=None), "19", SearchCriteria.DATE_OF_BIRTH) is False

    def test_name_is_ignored_for_other_criteria(self, customer_factory):
        assert matches(customer_factory(name="Jan"), "Jan", SearchCriteria.ISSUED_BY) is False


class TestNextSort:

    def test_first_click_sorts_ascending(self):
        assert next_sort(None, "surname") == SortDescription("surname", SortDirection.ASCENDING)

    def test_same_column_toggles_direction(self):
        first = next_sort(None, "surname")
        second = next_sort(first, "surname")
        third = next_sort(second, "surname")

        assert second.direction is SortDirection.DESCENDING
        assert third.direction is SortDirection.ASCENDING

    def test_other_column_resets_to_ascending(self):
        current = SortDescription("surname", SortDirection.DESCENDING)
        assert next_sort(current, "name") == SortDescription("name", SortDirection.ASCENDING)

    def test_unknown_column_is_rejected(self):
        with pytest.raises(ValueError):
            next_sort(None, "events")


class TestSortCustomers:

    def test_sorts_text_case_insensitively(self, customer_factory):
        customers = [customer_factory(id=1, surname="nowak"), customer_factory(id=2, surname="Kowalski"),
                     customer_factory(id=3, surname="Adamczyk")]

        asc = sort_customers(customers, SortDescription("surname"))
        desc = sort_customers(customers, SortDescription("surname", SortDirection.DESCENDING))

        assert [c.id for c in asc] == [3, 2, 1]
        assert [c.id for c in desc] == [1, 2, 3]

    def test_missing_dates_sort_first_when_ascending(self, sample_customers):
        result = sort_customers(sample_customers, SortDescription("date_of_birth"))
        assert [c.id for c in result] == [3, 1, 2]

    def test_no_sort_keeps_order(self, sample_customers):
        assert [c.id for c in sort_customers(sample_customers, None)] == [1, 2, 3]

    def test_sort_dates(self, customer_factory):
        customers = [customer_factory(id=1, date_of_death=date(2024, 5, 1)),
                     customer_factory(id=2, date_of_death=date(2023, 1, 1))]
        result = sort_customers(customers, SortDescription("date_of_death", SortDirection.DESCENDING))
        assert [c.id for c in result] == [1, 2]
