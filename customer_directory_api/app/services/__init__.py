"""
Service layer.

``validation`` checks incoming payloads before they reach the store and
``directory_store`` owns the customer records.  Neither module knows
anything about HTTP; the API layer maps their results and errors onto
responses.
"""
