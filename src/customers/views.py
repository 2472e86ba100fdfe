"""
Views for read operations - separate from command/write path.
Following Cosmic Python pattern: views bypass the domain model for reads
and serialize inside the session to avoid DetachedInstanceError.
"""
import json
import logging
from typing import Dict, Any, List, Optional
from sqlalchemy import select

from customers.adapters import orm
from customers.service_layer.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


def list_customers(uow: AbstractUnitOfWork) -> List[Dict[str, Any]]:
    """Return every stored customer as a plain dict, ordered by id."""
    with uow:
        customers = [c.to_dict() for c in uow.customers.list()]
    logger.debug(f"Listed {len(customers)} customers")
    return customers


def get_customer(customer_id: int, uow: AbstractUnitOfWork) -> Optional[Dict[str, Any]]:
    with uow:
        customer = uow.customers.get(customer_id)
        return customer.to_dict() if customer else None


def get_customer_history(customer_id: int, uow: AbstractUnitOfWork) -> List[Dict[str, Any]]:
    """
    Get the change history of a customer from the history read model.

    Entries are returned oldest first; deleted customers keep their history.
    """
    history = orm.customer_history
    with uow:
        rows = uow.session.execute(
            select(history.c.action, history.c.details, history.c.occurred_at)
            .where(history.c.customer_id == customer_id)
            .order_by(history.c.id)
        ).all()

    return [
        {
            "action": row.action,
            "details": json.loads(row.details) if row.details else {},
            "occurred_at": row.occurred_at.isoformat() if row.occurred_at else None,
        }
        for row in rows
    ]
