"""
API package containing the HTTP routes of the service.

The customer routes are served at the unversioned paths ``/customers``
and ``/customers/{id}`` that the browser UI calls directly.
"""
