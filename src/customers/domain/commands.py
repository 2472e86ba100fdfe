"""Commands for the customer registry."""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Any, Optional

from shared.domain.commands import Command


@dataclass
class AddCustomer(Command):
    """Command to register a new customer record."""
    name: str
    surname: str
    certificate_number: str = ""
    sex: str = " "
    date_of_birth: Optional[date] = None
    place_of_birth: str = ""
    date_of_death: Optional[date] = None
    place_of_death: str = ""
    death_certificate_number: str = ""
    issue_date: Optional[date] = None
    issued_by: str = ""
    address: str = ""


@dataclass
class UpdateCustomer(Command):
    """Command to overwrite selected fields of an existing customer."""
    customer_id: int
    changes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class DeleteCustomer(Command):
    """Command to remove a customer record by id."""
    customer_id: int


@dataclass
class GenerateCertificatePdf(Command):
    """Command to render the certificate of a customer to a PDF file."""
    customer_id: int
    path: str
