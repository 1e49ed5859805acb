"""
Pydantic schema definitions for API payloads.

The customer record is the only entity of the service.  Request
bodies, stored records and the small status bodies returned by the
API are all described here so that the wire format lives in one place.
"""
