import abc
from typing import Set, List, Optional
from customers.domain import domain

import logging

logger = logging.getLogger(__name__)


class AbstractRepository(abc.ABC):
    def __init__(self):
        self.seen = set()  # type: Set[domain.Customer]

    def add(self, customer: domain.Customer) -> domain.Customer:
        self._add(customer)
        self.seen.add(customer)
        return customer

    def get(self, customer_id) -> Optional[domain.Customer]:
        customer = self._get(customer_id)
        if customer:
            self.seen.add(customer)
        return customer

    def list(self) -> List[domain.Customer]:
        customers = self._list()
        for customer in customers:
            self.seen.add(customer)
        return customers

    def delete(self, customer: domain.Customer) -> None:
        self._delete(customer)
        self.seen.add(customer)

    @abc.abstractmethod
    def _add(self, customer: domain.Customer):
        raise NotImplementedError

    @abc.abstractmethod
    def _get(self, customer_id) -> Optional[domain.Customer]:
        raise NotImplementedError

    @abc.abstractmethod
    def _list(self) -> List[domain.Customer]:
        raise NotImplementedError

    @abc.abstractmethod
    def _delete(self, customer: domain.Customer):
        raise NotImplementedError


class SqlAlchemyRepository(AbstractRepository):
    def __init__(self, session):
        super().__init__()
        self.session = session

    def _add(self, customer):
        self.session.add(customer)
        # flush so the autoincrement id is known to the caller
        self.session.flush()

    def _get(self, customer_id):
        return self.session.query(domain.Customer).filter_by(id=customer_id).first()

    def _list(self) -> List[domain.Customer]:
        return self.session.query(domain.Customer).order_by(domain.Customer.id).all()

    def _delete(self, customer):
        self.session.delete(customer)
