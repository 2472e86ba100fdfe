import json
import logging
from dataclasses import asdict
from datetime import date, datetime

from customers.domain.commands import AddCustomer, UpdateCustomer, DeleteCustomer, GenerateCertificatePdf
from customers.domain.domain import Customer
from customers.domain import events
from customers.service_layer.unit_of_work import AbstractUnitOfWork
from customers.adapters.pdf import PdfGenerationError
from customers.adapters import orm

logger = logging.getLogger(__name__)


class CustomerNotFound(Exception):
    """Raised when a command refers to a customer id that is not stored."""
    pass


def _get_or_raise(uow: AbstractUnitOfWork, customer_id: int) -> Customer:
    customer = uow.customers.get(customer_id)
    if customer is None:
        raise CustomerNotFound(f"Customer {customer_id} not found")
    return customer


def add_customer(
    command: AddCustomer,
    uow: AbstractUnitOfWork
) -> int:
    """
    Store a new customer record.

    Returns:
        customer_id: The id assigned by the store
    """
    logger.info(f"Processing AddCustomer command for {command.name} {command.surname}")

    with uow:
        customer = Customer(**asdict(command))
        uow.customers.add(customer)
        customer.register()
        customer_id = customer.id
        uow.commit()

    logger.info(f"Added customer {customer_id}")
    return customer_id


def update_customer(
    command: UpdateCustomer,
    uow: AbstractUnitOfWork
) -> dict:
    """
    Overwrite fields of an existing customer.

    Returns:
        The changes that were actually applied

    Raises:
        CustomerNotFound: If no customer has the given id
        ValueError: If a change names an unknown or read-only field
    """
    logger.info(f"Processing UpdateCustomer command for customer {command.customer_id}")

    try:
        with uow:
            customer = _get_or_raise(uow, command.customer_id)
            applied = customer.update(**command.changes)
            uow.commit()

        logger.info(f"Updated customer {command.customer_id}: {sorted(applied)}")
        return applied

    except CustomerNotFound as e:
        logger.error(f"Cannot update: {e}")
        raise

    except ValueError as e:
        logger.error(f"Invalid update for customer {command.customer_id}: {e}")
        raise


def delete_customer(
    command: DeleteCustomer,
    uow: AbstractUnitOfWork
) -> int:
    """
    Remove a customer record.

    Raises:
        CustomerNotFound: If no customer has the given id
    """
    logger.info(f"Processing DeleteCustomer command for customer {command.customer_id}")

    try:
        with uow:
            customer = _get_or_raise(uow, command.customer_id)
            customer.mark_deleted()
            uow.customers.delete(customer)
            uow.commit()

        logger.info(f"Deleted customer {command.customer_id}")
        return command.customer_id

    except CustomerNotFound as e:
        logger.error(f"Cannot delete: {e}")
        raise


def generate_certificate_pdf(
    command: GenerateCertificatePdf,
    uow: AbstractUnitOfWork
) -> str:
    """
    Render the certificate of a stored customer to a PDF file.

    Returns:
        path: The file that was written

    Raises:
        CustomerNotFound: If no customer has the given id
        PdfGenerationError: If the renderer cannot produce the file
    """
    logger.info(f"Processing GenerateCertificatePdf command for customer {command.customer_id}")

    try:
        with uow:
            customer = _get_or_raise(uow, command.customer_id)
            path = uow.pdf_renderer.render(customer, command.path)
            customer.certificate_generated(path)

        logger.info(f"Generated certificate for customer {command.customer_id} at {path}")
        return path

    except CustomerNotFound as e:
        logger.error(f"Cannot generate certificate: {e}")
        raise

    except PdfGenerationError as e:
        logger.error(f"Failed to render certificate for customer {command.customer_id}: {e}")
        raise


def _json_default(value):
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    raise TypeError(f"Cannot serialize {type(value).__name__}")


HISTORY_ACTIONS = {
    events.CustomerAdded: "added",
    events.CustomerUpdated: "updated",
    events.CustomerDeleted: "deleted",
    events.CertificateGenerated: "certificate_generated",
}


def record_history(event, uow: AbstractUnitOfWork):
    """
    Append a customer event to the history read model.

    The read model is queried by views.get_customer_history.
    """
    action = HISTORY_ACTIONS[type(event)]
    details = {
        k: v for k, v in asdict(event).items()
        if k not in ("customer_id", "occurred_at")
    }
    logger.info(f"Recording '{action}' in history of customer {event.customer_id}")

    with uow:
        uow.session.execute(
            orm.customer_history.insert().values(
                customer_id=event.customer_id,
                action=action,
                details=json.dumps(details, default=_json_default, ensure_ascii=False),
                occurred_at=event.occurred_at,
            ),
        )
        uow.commit()
