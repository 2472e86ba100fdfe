# pylint: disable=attribute-defined-outside-init
from __future__ import annotations
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.orm.session import Session


import config
from shared.service_layer.unit_of_work import AbstractUnitOfWork as SharedUnitOfWork
from customers.adapters import repository, pdf


class AbstractUnitOfWork(SharedUnitOfWork):
    customers: repository.AbstractRepository
    pdf_renderer: pdf.AbstractPdfRenderer

    def collect_new_events(self):
        for customer in self.customers.seen:
            while customer.events:
                yield customer.events.pop(0)


DEFAULT_SESSION_FACTORY = sessionmaker(
    bind=create_engine(config.get_database_uri()),
)

class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session_factory=DEFAULT_SESSION_FACTORY, pdf_renderer_impl=None):
        self.session_factory = session_factory
        self.pdf_renderer_impl = pdf_renderer_impl

    def __enter__(self):
        self.session = self.session_factory()  # type: Session
        self.customers = repository.SqlAlchemyRepository(self.session)
        return super().__enter__()

    @property
    def pdf_renderer(self) -> pdf.AbstractPdfRenderer:
        # built on first use; font loading must not affect plain reads
        if self.pdf_renderer_impl is None:
            self.pdf_renderer_impl = pdf.ReportLabPdfRenderer()
        return self.pdf_renderer_impl

    def __exit__(self, *args):
        super().__exit__(*args)
        self.session.close()

    def _commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()
