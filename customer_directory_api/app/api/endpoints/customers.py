"""
Customer endpoints.

These routes expose the CRUD API consumed by the browser UI:

* ``GET /customers`` – list every customer (possibly an empty list).
* ``GET /customers/{id}`` – fetch one customer.
* ``POST /customers`` – create a customer; the server assigns the id.
* ``PUT /customers/{id}`` – replace name, email and telephone.
* ``DELETE /customers/{id}`` – remove a customer.

Request bodies are accepted as arbitrary JSON and handed to the
validation module, so that a body which is not a JSON object fails the
same way as a body with a bad field: ``400`` with an ``error`` message.
A body that is not JSON at all is rejected by FastAPI before the
handler runs and is mapped to the same ``400``.  Unknown ids surface
from the store as ``CustomerNotFoundError`` and become ``404``; see
``api.error_handlers``.

The handlers are plain functions, so FastAPI runs them in its worker
thread pool and requests reach the store in parallel.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, status

from customer_directory_api.app.api.deps import get_store
from customer_directory_api.app.schemas.customer import (
    CustomerCreate,
    CustomerRead,
    CustomerUpdate,
    ErrorResponse,
    MessageResponse,
)
from customer_directory_api.app.services.directory_store import DirectoryStore
from customer_directory_api.app.services.validation import validate_customer_payload

router = APIRouter()

DELETED_MESSAGE = "Customer deleted successfully"


def _json_body(schema: type) -> dict:
    # The body is declared as ``Any``; describe its real shape for the
    # OpenAPI document.
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }


@router.get("", response_model=List[CustomerRead])
def list_customers(store: DirectoryStore = Depends(get_store)) -> List[CustomerRead]:
    """Return all customers in the order they were created."""
    return store.list_all()


@router.get(
    "/{customer_id}",
    response_model=CustomerRead,
    responses={404: {"model": ErrorResponse}},
)
def get_customer(customer_id: str, store: DirectoryStore = Depends(get_store)) -> CustomerRead:
    """Retrieve a single customer by id.

    Ids are matched case‑insensitively.  Unknown and malformed ids both
    return ``404``.
    """
    return store.get(customer_id)


@router.post(
    "",
    response_model=CustomerRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    openapi_extra=_json_body(CustomerCreate),
)
def create_customer(
    payload: Any = Body(None),
    store: DirectoryStore = Depends(get_store),
) -> CustomerRead:
    """Create a customer.

    ``telephone`` is optional and defaults to an empty string.
    """
    fields = validate_customer_payload(payload, CustomerCreate)
    return store.create(fields)


@router.put(
    "/{customer_id}",
    response_model=CustomerRead,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    openapi_extra=_json_body(CustomerUpdate),
)
def update_customer(
    customer_id: str,
    payload: Any = Body(None),
    store: DirectoryStore = Depends(get_store),
) -> CustomerRead:
    """Replace the editable fields of an existing customer.

    The id is checked before the fields, so an unknown id is reported as
    ``404`` even when the fields are also invalid.
    """
    store.get(customer_id)
    fields = validate_customer_payload(payload, CustomerUpdate)
    return store.update(customer_id, fields)


@router.delete(
    "/{customer_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
def delete_customer(customer_id: str, store: DirectoryStore = Depends(get_store)) -> MessageResponse:
    """Delete a customer.  Deleting the same id twice returns ``404``."""
    store.delete(customer_id)
    return MessageResponse(message=DELETED_MESSAGE)
