"""Domain events for the customer registry."""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Any

from shared.domain.commands import Event


@dataclass
class CustomerAdded(Event):
    """Event raised when a new customer record has been stored."""
    customer_id: int
    full_name: str
    occurred_at: datetime


@dataclass
class CustomerUpdated(Event):
    """Event raised when fields of a customer record have changed."""
    customer_id: int
    changes: Dict[str, Any]
    occurred_at: datetime


@dataclass
class CustomerDeleted(Event):
    """Event raised when a customer record has been removed."""
    customer_id: int
    full_name: str
    occurred_at: datetime


@dataclass
class CertificateGenerated(Event):
    """Event raised after a certificate PDF has been written for a customer."""
    customer_id: int
    path: str
    occurred_at: datetime
