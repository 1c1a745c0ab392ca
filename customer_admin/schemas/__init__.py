"""Pydantic request/response schemas exchanged with the backend.

Import explicitly, e.g. ``from customer_admin.schemas.customer import Customer``.
"""
