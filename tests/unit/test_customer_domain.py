"""Unit tests for the customer domain model"""
from datetime import date

import pytest

from customers.domain.domain import Customer, EMPTY_CUSTOMER_ID, format_date
from customers.domain.events import CustomerAdded, CustomerUpdated, CustomerDeleted, CertificateGenerated


def test_empty_customer_is_placeholder():
    """Test the placeholder record used after a deletion"""
    customer = Customer.empty()

    assert customer.id == EMPTY_CUSTOMER_ID
    assert customer.is_empty
    assert customer.name == ""
    assert customer.surname == ""
    assert customer.sex == " "
    assert customer.date_of_birth is None
    assert customer.date_of_death is None
    assert customer.issue_date is None
    assert len(customer.events) == 0


def test_full_name_joins_name_and_surname(customer_factory):
    assert customer_factory(name="Anna", surname="Nowak").full_name == "Anna Nowak"


def test_update_applies_only_changed_fields(customer_factory):
    customer = customer_factory(id=7)

    applied = customer.update(name="Janusz", surname="Kowalski", place_of_death="Łódź")

    assert applied == {"name": "Janusz", "place_of_death": "Łódź"}
    assert customer.name == "Janusz"
    assert customer.place_of_death == "Łódź"

    assert len(customer.events) == 1
    event = customer.events[0]
    assert isinstance(event, CustomerUpdated)
    assert event.customer_id == 7
    assert event.changes == applied


def test_update_without_changes_records_no_event(customer_factory):
    customer = customer_factory(id=7)

    applied = customer.update(name=customer.name)

    assert applied == {}
    assert customer.events == []


def test_update_rejects_unknown_and_read_only_fields(customer_factory):
    customer = customer_factory(id=7)

    with pytest.raises(ValueError):
        customer.update(nickname="Jasiek")
    with pytest.raises(ValueError):
        customer.update(id=8)

    assert customer.id == 7
    assert customer.events == []


def test_lifecycle_methods_record_events(customer_factory):
    customer = customer_factory(id=3)

    customer.register()
    customer.certificate_generated("/tmp/swiadectwo.pdf")
    customer.mark_deleted()

    assert [type(e) for e in customer.events] == [CustomerAdded, CertificateGenerated, CustomerDeleted]
    assert customer.events[0].full_name == "Jan Kowalski"
    assert customer.events[1].path == "/tmp/swiadectwo.pdf"
    assert all(e.customer_id == 3 for e in customer.events)


def test_copy_keeps_fields_but_not_events(customer_factory):
    customer = customer_factory(id=5)
    customer.register()

    copy = customer.copy()

    assert copy is not customer
    assert copy.to_dict() == customer.to_dict()
    assert copy.events == []


def test_format_date():
    assert format_date(date(2024, 1, 5)) == "05.01.2024"
    assert format_date(None) == ""
