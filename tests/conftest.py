# pylint: disable=redefined-outer-name
from datetime import date
from pathlib import Path
from typing import List, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, clear_mappers
from sqlalchemy.pool import StaticPool

from customers.adapters import orm
from customers.adapters.pdf import AbstractPdfRenderer
from customers.domain.domain import Customer
from customers.service_layer.unit_of_work import SqlAlchemyUnitOfWork
from customers.viewmodel.dialogs import AbstractDialogService


class FakePdfRenderer(AbstractPdfRenderer):
    """Writes a placeholder file and remembers what it rendered."""

    def __init__(self):
        self.rendered = []  # type: List[tuple]

    def render(self, customer: Customer, path: str) -> str:
        Path(path).write_bytes(b"%PDF-1.4 fake certificate")
        self.rendered.append((customer.full_name, path))
        return path


class FakeDialogService(AbstractDialogService):
    """Scripted answers for dialogs; records every dialog that was shown."""

    def __init__(self, confirm_answer: bool = True, save_path: Optional[str] = None):
        self.confirm_answer = confirm_answer
        self.save_path = save_path
        self.confirmations = []
        self.messages = []
        self.save_requests = []

    def confirm(self, message, title):
        self.confirmations.append((message, title))
        return self.confirm_answer

    def inform(self, message, title):
        self.messages.append((message, title))

    def ask_save_path(self, default_filename, initial_dir, file_types=()):
        self.save_requests.append((default_filename, initial_dir, tuple(file_types)))
        return self.save_path


@pytest.fixture
def sqlite_session_factory():
    """Create SQLite in-memory database for fast testing."""
    # StaticPool shares the single in-memory connection with TestClient worker threads
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    orm.metadata.create_all(engine)
    orm.start_mappers()

    yield sessionmaker(bind=engine)

    clear_mappers()
    engine.dispose()


@pytest.fixture
def fake_pdf_renderer():
    return FakePdfRenderer()


@pytest.fixture
def uow_factory(sqlite_session_factory, fake_pdf_renderer):
    def make_uow():
        return SqlAlchemyUnitOfWork(sqlite_session_factory, pdf_renderer_impl=fake_pdf_renderer)
    return make_uow


@pytest.fixture
def fake_dialogs(tmp_path):
    return FakeDialogService(save_path=str(tmp_path / "certificate.pdf"))


def make_customer(**overrides) -> Customer:
    fields = dict(
        name="Jan",
        surname="Kowalski",
        certificate_number="SW/2024/00001",
        sex="M",
        date_of_birth=date(1941, 3, 12),
        place_of_birth="Kraków",
        date_of_death=date(2024, 1, 5),
        place_of_death="Warszawa",
        death_certificate_number="AZ-1234/2024",
        issue_date=date(2024, 1, 8),
        issued_by="USC Warszawa",
        address="ul. Długa 5, 00-238 Warszawa",
    )
    fields.update(overrides)
    return Customer(**fields)


@pytest.fixture
def sample_customers() -> List[Customer]:
    return [
        make_customer(id=1),
        make_customer(id=2, name="Anna", surname="Nowak", sex="K",
                      date_of_birth=date(1950, 7, 1), certificate_number="SW/2024/00002",
                      address="ul. Polna 3, Gdańsk"),
        make_customer(id=3, name="Zofia", surname="Wiśniewska", sex="K",
                      date_of_birth=None, certificate_number="SW/2023/00017",
                      address="ul. Lipowa 12, Poznań"),
    ]


@pytest.fixture
def customer_factory():
    return make_customer
