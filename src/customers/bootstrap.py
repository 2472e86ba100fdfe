"""Database initialization and wiring for the API and the presentation layer."""

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import config
from customers.adapters import orm
from customers.adapters.pdf import AbstractPdfRenderer
from customers.service_layer.services import CustomerService, PdfService
from customers.service_layer.unit_of_work import SqlAlchemyUnitOfWork
from customers.viewmodel.customer_list import CustomerListViewModel
from customers.viewmodel.dialogs import AbstractDialogService

logger = logging.getLogger(__name__)


def init_database(database_uri: str = None):
    """Create the schema if needed and map the domain model (Cosmic Python pattern)."""
    uri = database_uri or config.get_database_uri()
    if uri.startswith("sqlite:///"):
        config.ensure_data_dir()
    engine = create_engine(uri)
    orm.metadata.create_all(engine)
    orm.start_mappers()
    logger.info("✓ Customer database initialized")
    return engine


def create_customer_list_view_model(
    dialog_service: AbstractDialogService,
    database_uri: Optional[str] = None,
    pdf_renderer: Optional[AbstractPdfRenderer] = None,
    documents_dir: Optional[Path] = None,
) -> CustomerListViewModel:
    """
    Composition root for a desktop front end.

    Initializes the database once, then builds the grid view-model on
    services that share one session factory. The toolkit supplies only the
    dialog service.
    """
    session_factory = sessionmaker(bind=init_database(database_uri))

    def uow_factory():
        return SqlAlchemyUnitOfWork(session_factory, pdf_renderer_impl=pdf_renderer)

    return CustomerListViewModel(
        CustomerService(uow_factory),
        PdfService(pdf_renderer, uow_factory),
        dialog_service,
        documents_dir=documents_dir,
    )
