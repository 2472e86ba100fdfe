from dataclasses import dataclass, field, fields
from datetime import date, datetime, timezone
from typing import List, Optional, Dict, Any

from customers.domain.events import CustomerAdded, CustomerUpdated, CustomerDeleted, CertificateGenerated

EMPTY_CUSTOMER_ID = -1
DATE_FIELDS = ("date_of_birth", "date_of_death", "issue_date")
DATE_FORMAT = "%d.%m.%Y"


def format_date(value: Optional[date]) -> str:
    """Render a date the way it is shown in the grid and on certificates."""
    if value is None:
        return ""
    return value.strftime(DATE_FORMAT)


@dataclass(eq=False)
class Customer:
    id: Optional[int] = None
    name: str = ""
    surname: str = ""
    certificate_number: str = ""
    sex: str = " "                          # 'K' | 'M' | ' ' when unknown
    date_of_birth: Optional[date] = None
    place_of_birth: str = ""
    date_of_death: Optional[date] = None
    place_of_death: str = ""
    death_certificate_number: str = ""
    issue_date: Optional[date] = None
    issued_by: str = ""
    address: str = ""
    events: List = field(default_factory=list, repr=False)

    @classmethod
    def empty(cls) -> "Customer":
        """Placeholder record shown when nothing is selected."""
        return cls(id=EMPTY_CUSTOMER_ID)

    @property
    def is_empty(self) -> bool:
        return self.id == EMPTY_CUSTOMER_ID

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in ("id",) + EDITABLE_FIELDS}

    def copy(self) -> "Customer":
        """Detached copy carrying the same field values but no events."""
        return Customer(**self.to_dict())

    def register(self) -> None:
        """Record that the customer has been stored; requires an assigned id."""
        self.events.append(
            CustomerAdded(
                customer_id=self.id,
                full_name=self.full_name,
                occurred_at=datetime.now(timezone.utc),
            )
        )

    def update(self, **changes) -> Dict[str, Any]:
        """
        Apply field changes and record a CustomerUpdated event.

        Only fields whose value actually differs are applied and reported.
        Returns the applied changes.
        """
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown or read-only customer fields: {sorted(unknown)}")

        applied = {}
        for name, value in changes.items():
            if getattr(self, name) != value:
                setattr(self, name, value)
                applied[name] = value

        if applied:
            self.events.append(
                CustomerUpdated(
                    customer_id=self.id,
                    changes=applied,
                    occurred_at=datetime.now(timezone.utc),
                )
            )
        return applied

    def mark_deleted(self) -> None:
        self.events.append(
            CustomerDeleted(
                customer_id=self.id,
                full_name=self.full_name,
                occurred_at=datetime.now(timezone.utc),
            )
        )

    def certificate_generated(self, path: str) -> None:
        self.events.append(
            CertificateGenerated(
                customer_id=self.id,
                path=path,
                occurred_at=datetime.now(timezone.utc),
            )
        )


EDITABLE_FIELDS = tuple(
    f.name for f in fields(Customer) if f.name not in ("id", "events")
)
