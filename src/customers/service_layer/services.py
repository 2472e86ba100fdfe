"""
Service facades used by the presentation layer.

The view-model talks to these two objects only; each call opens its own
unit of work and hands back detached Customer copies.
"""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from customers import views
from customers.adapters.pdf import AbstractPdfRenderer, ReportLabPdfRenderer
from customers.domain import commands, events
from customers.domain.domain import Customer
from customers.service_layer import messagebus
from customers.service_layer.unit_of_work import AbstractUnitOfWork, SqlAlchemyUnitOfWork

logger = logging.getLogger(__name__)

UnitOfWorkFactory = Callable[[], AbstractUnitOfWork]


class CustomerService:
    """Retrieval, update and deletion of customer records."""

    def __init__(self, uow_factory: UnitOfWorkFactory = SqlAlchemyUnitOfWork):
        self.uow_factory = uow_factory

    def find_all(self) -> List[Customer]:
        return [Customer(**row) for row in views.list_customers(self.uow_factory())]

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        row = views.get_customer(customer_id, self.uow_factory())
        return Customer(**row) if row else None

    def add_customer(self, customer: Customer) -> int:
        fields = customer.to_dict()
        fields.pop("id")
        [customer_id] = messagebus.handle(commands.AddCustomer(**fields), self.uow_factory())
        customer.id = customer_id
        return customer_id

    def update_customer(self, customer: Customer) -> dict:
        changes = customer.to_dict()
        changes.pop("id")
        [applied] = messagebus.handle(
            commands.UpdateCustomer(customer_id=customer.id, changes=changes),
            self.uow_factory(),
        )
        return applied

    def delete_customer(self, customer_id: int) -> None:
        messagebus.handle(commands.DeleteCustomer(customer_id=customer_id), self.uow_factory())


class PdfService:
    """Renders the record as shown to the user, including unsaved edits."""

    def __init__(self, renderer: Optional[AbstractPdfRenderer] = None,
                 uow_factory: UnitOfWorkFactory = SqlAlchemyUnitOfWork):
        self.renderer = renderer
        self.uow_factory = uow_factory

    def generate_pdf(self, customer: Customer, path: str) -> str:
        if self.renderer is None:
            self.renderer = ReportLabPdfRenderer()
        written = self.renderer.render(customer, path)
        messagebus.handle(
            events.CertificateGenerated(
                customer_id=customer.id,
                path=written,
                occurred_at=datetime.now(timezone.utc),
            ),
            self.uow_factory(),
        )
        return written

