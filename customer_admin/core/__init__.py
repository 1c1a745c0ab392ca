"""Configuration, errors, endpoints and formatting helpers.

Use explicit imports:
    from customer_admin.core.config import settings
    from customer_admin.core.exceptions import AdminConsoleError
"""
