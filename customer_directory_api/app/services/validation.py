"""
Validation of customer payloads.

Request bodies are checked here before they reach the directory store.
``validate_customer_payload`` accepts either the raw body of a request
(bytes, parsed as JSON) or an already decoded JSON value and
returns a fully populated schema instance, with ``telephone`` filled in
when the client left it out.

Every failure is reported as :class:`CustomerValidationError`, whether
the body is not JSON at all, is JSON but not an object, or has a field
that breaks its rule.  Callers only ever see "bad request".

Request validation errors raised by FastAPI itself are formatted with
the same ``format_validation_errors`` helper, so both paths read alike.

The functions in this module are pure: they never touch the store.
"""

import logging
import re
from typing import Any, List, Optional, Type, TypeVar

from pydantic import ValidationError

from customer_directory_api.app.core.errors import CustomerValidationError
from customer_directory_api.app.schemas.customer import CustomerCreate


logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=CustomerCreate)

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

# Leading ``loc`` entries FastAPI adds to say where in the request a value was.
REQUEST_LOCATIONS = {"body", "path", "query", "header", "cookie"}


def validate_customer_payload(payload: Any, schema: Type[SchemaT] = CustomerCreate) -> SchemaT:
    """Validate a create or update payload.

    Parameters
    ----------
    payload : Any
        Raw request body (``bytes``, parsed as JSON here) or an already
        decoded JSON value such as the one FastAPI hands to an endpoint.
    schema : type
        ``CustomerCreate`` or ``CustomerUpdate``.

    Returns
    -------
    CustomerCreate
        The validated fields.  ``telephone`` is always a string.

    Raises
    ------
    CustomerValidationError
        If the payload cannot be parsed or a field is invalid.
    """
    try:
        if isinstance(payload, (bytes, bytearray)):
            return schema.model_validate_json(payload)
        return schema.model_validate(payload)
    except ValidationError as exc:
        message = format_validation_errors(exc.errors())
        logger.info("Rejected customer payload: %s", message)
        raise CustomerValidationError(message) from exc


def format_validation_errors(errors: List[dict]) -> str:
    """Turn pydantic error dicts into one human‑readable message."""
    messages: List[str] = []
    for err in errors:
        message = _describe_error(err)
        if message not in messages:
            messages.append(message)
    return "; ".join(messages) or "Invalid customer data"


def _describe_error(err: dict) -> str:
    err_type = err.get("type", "")
    loc = list(err.get("loc", ()))
    if loc and loc[0] in REQUEST_LOCATIONS:
        loc = loc[1:]
    if err_type == "json_invalid":
        return "request body is not valid JSON"
    if not loc:
        return "request body must be a JSON object"
    field = ".".join(str(part) for part in loc)
    if err_type == "missing" or (err_type == "string_type" and err.get("input") is None):
        return f"{field} is required"
    if err_type == "string_type":
        return f"{field} must be a string"
    if err_type == "value_error":
        ctx_error = (err.get("ctx") or {}).get("error")
        if ctx_error:
            return str(ctx_error)
    return f"{field}: {err.get('msg', 'invalid value')}"


def normalize_customer_id(raw: Optional[str]) -> Optional[str]:
    """Return the canonical lowercase form of a customer id.

    ``None`` is returned for anything that is not a 36‑character
    hyphenated UUID, which callers treat as an unknown id.
    """
    if not raw or not UUID_PATTERN.fullmatch(raw):
        return None
    return raw.lower()
