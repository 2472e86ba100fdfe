import logging
from sqlalchemy import (
    Table,
    Column,
    Integer,
    String,
    Date,
    DateTime,
    Text,
    event,
)
from sqlalchemy.orm import registry
from customers.domain import domain

logger = logging.getLogger(__name__)

# SQLAlchemy 2.0 pattern: use registry
mapper_registry = registry()
metadata = mapper_registry.metadata

customers = Table(
    "customers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False, server_default=""),
    Column("surname", String(255), nullable=False, server_default=""),
    Column("certificate_number", String(255)),
    Column("sex", String(1)),
    Column("date_of_birth", Date),
    Column("place_of_birth", String(255)),
    Column("date_of_death", Date),
    Column("place_of_death", String(255)),
    Column("death_certificate_number", String(255)),
    Column("issue_date", Date),
    Column("issued_by", String(255)),
    Column("address", String(512)),
)

# Read model table - not mapped to domain entity, filled by event handlers
customer_history = Table(
    "customer_history",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("customer_id", Integer, nullable=False),
    Column("action", String(64), nullable=False),
    Column("details", Text),
    Column("occurred_at", DateTime),
)


def _init_events(customer, _):
    customer.events = []


def start_mappers():
    logger.info("Starting mappers")
    mapper_registry.map_imperatively(domain.Customer, customers)
    event.listen(domain.Customer, "load", _init_events)
