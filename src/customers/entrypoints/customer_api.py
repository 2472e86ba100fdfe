"""
Customer Registry API Entrypoint - Thin API with Command Dispatch
"""
import logging
import os
import tempfile
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from pathlib import Path
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Response
from fastapi.responses import FileResponse
from pydantic import BaseModel, ConfigDict
from starlette.background import BackgroundTask

from customers import bootstrap, views
from customers.adapters.pdf import PdfGenerationError, default_pdf_filename
from customers.domain import commands
from customers.domain.domain import Customer, DATE_FIELDS
from customers.domain.search import (
    SearchCriteria,
    SortDescription,
    SortDirection,
    filter_customers,
    sort_customers,
)
from customers.service_layer import messagebus
from customers.service_layer.handlers import CustomerNotFound
from customers.service_layer.unit_of_work import SqlAlchemyUnitOfWork

log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
logging.basicConfig(
    level=getattr(logging, log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize database and ORM mappers (Cosmic Python pattern)
    bootstrap.init_database()
    yield


app = FastAPI(
    title="Certificate Registry API",
    description="Deceased-person certificate records: listing, updates and PDF export",
    version="1.0.0",
    lifespan=lifespan,
)


def get_uow():
    return SqlAlchemyUnitOfWork()


# ---------- Request/Response models ----------

class CustomerFields(BaseModel):
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

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jan",
                "surname": "Kowalski",
                "certificate_number": "SW/2024/001",
                "sex": "M",
                "date_of_birth": "1941-03-12",
                "place_of_birth": "Kraków",
                "date_of_death": "2024-01-05",
                "place_of_death": "Warszawa",
                "death_certificate_number": "AZ-1234/2024",
                "issue_date": "2024-01-08",
                "issued_by": "USC Warszawa",
                "address": "ul. Długa 5, 00-238 Warszawa",
            }
        }
    )


class CustomerResponse(CustomerFields):
    id: int


class CustomersListResponse(BaseModel):
    customers: List[CustomerResponse]
    total_count: int


class CustomerUpdateRequest(BaseModel):
    """Partial update - only the fields present in the request are changed."""
    name: Optional[str] = None
    surname: Optional[str] = None
    certificate_number: Optional[str] = None
    sex: Optional[str] = None
    date_of_birth: Optional[date] = None
    place_of_birth: Optional[str] = None
    date_of_death: Optional[date] = None
    place_of_death: Optional[str] = None
    death_certificate_number: Optional[str] = None
    issue_date: Optional[date] = None
    issued_by: Optional[str] = None
    address: Optional[str] = None


class CustomerUpdateResponse(BaseModel):
    customer: CustomerResponse
    changed_fields: List[str]


class HistoryEntry(BaseModel):
    action: str
    details: dict
    occurred_at: Optional[str]


# ---------- Endpoints ----------

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "certificate-registry-api",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get("/api/v1/customers", response_model=CustomersListResponse, summary="List customers")
def list_customers(
    filter: str = "",
    criteria: SearchCriteria = SearchCriteria.NAME_AND_SURNAME,
    sort: Optional[str] = None,
    direction: SortDirection = SortDirection.ASCENDING,
    uow=Depends(get_uow),
):
    """
    List customers, optionally filtered and sorted.

    Args:
        filter: Case-insensitive substring matched against the chosen criteria
        criteria: Field(s) the filter applies to (default: name and surname)
        sort: Column to sort by
        direction: asc or desc
    """
    try:
        customers = [Customer(**row) for row in views.list_customers(uow)]
        customers = filter_customers(customers, filter, criteria)
        if sort:
            customers = sort_customers(customers, SortDescription(sort, direction))

        return CustomersListResponse(
            customers=[CustomerResponse(**c.to_dict()) for c in customers],
            total_count=len(customers),
        )

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error listing customers: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@app.get("/api/v1/customers/{customer_id}", response_model=CustomerResponse, summary="Get customer by id")
def get_customer(customer_id: int, uow=Depends(get_uow)):
    customer = views.get_customer(customer_id, uow)
    if not customer:
        raise HTTPException(status_code=404, detail=f"Customer with ID {customer_id} not found")
    return CustomerResponse(**customer)


@app.post("/api/v1/customers", response_model=CustomerResponse, status_code=201, summary="Create a customer")
def create_customer(request: CustomerFields, uow=Depends(get_uow)):
    try:
        logger.info(f"Creating customer {request.name} {request.surname}")
        [customer_id] = messagebus.handle(commands.AddCustomer(**request.model_dump()), uow)
        return CustomerResponse(id=customer_id, **request.model_dump())

    except Exception as e:
        logger.error(f"Error creating customer: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@app.put("/api/v1/customers/{customer_id}", response_model=CustomerUpdateResponse, summary="Update customer fields")
def update_customer(customer_id: int, request: CustomerUpdateRequest, uow=Depends(get_uow)):
    """
    Update the fields present in the request body.

    Returns the stored record and the names of the fields that changed.
    """
    try:
        changes = {
            # an explicit null clears a text field
            name: "" if value is None and name not in DATE_FIELDS else value
            for name, value in request.model_dump(exclude_unset=True).items()
        }
        [applied] = messagebus.handle(
            commands.UpdateCustomer(customer_id=customer_id, changes=changes), uow
        )
        customer = views.get_customer(customer_id, uow)
        return CustomerUpdateResponse(
            customer=CustomerResponse(**customer),
            changed_fields=sorted(applied),
        )

    except CustomerNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating customer {customer_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@app.delete("/api/v1/customers/{customer_id}", status_code=204, summary="Delete a customer")
def delete_customer(customer_id: int, uow=Depends(get_uow)):
    try:
        messagebus.handle(commands.DeleteCustomer(customer_id=customer_id), uow)
        return Response(status_code=204)

    except CustomerNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error deleting customer {customer_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@app.get("/api/v1/customers/{customer_id}/certificate", summary="Download the certificate PDF")
def download_certificate(customer_id: int, uow=Depends(get_uow)):
    """Render the certificate to a temporary file and stream it as a download."""
    customer = views.get_customer(customer_id, uow)
    if not customer:
        raise HTTPException(status_code=404, detail=f"Customer with ID {customer_id} not found")

    fd, tmp_path = tempfile.mkstemp(suffix=".pdf")
    os.close(fd)
    try:
        messagebus.handle(commands.GenerateCertificatePdf(customer_id=customer_id, path=tmp_path), uow)
    except CustomerNotFound as e:
        Path(tmp_path).unlink(missing_ok=True)
        raise HTTPException(status_code=404, detail=str(e))
    except PdfGenerationError as e:
        Path(tmp_path).unlink(missing_ok=True)
        logger.error(f"Error rendering certificate for customer {customer_id}: {e}")
        raise HTTPException(status_code=500, detail="Certificate could not be generated")

    return FileResponse(
        tmp_path,
        media_type="application/pdf",
        filename=default_pdf_filename(Customer(**customer)),
        background=BackgroundTask(Path(tmp_path).unlink, missing_ok=True),
    )


@app.get("/api/v1/customers/{customer_id}/history", response_model=List[HistoryEntry], summary="Change history of a customer")
def get_customer_history(customer_id: int, uow=Depends(get_uow)):
    return [HistoryEntry(**entry) for entry in views.get_customer_history(customer_id, uow)]


def main():
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("API_BIND", "127.0.0.1"),
        port=int(os.getenv("API_PORT", "8000")),
    )
