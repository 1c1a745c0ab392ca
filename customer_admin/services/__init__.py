"""Console services: API client, auth context and per-entity workflows.

Imports are not eagerly loaded here. Use explicit imports:
    from customer_admin.services.api_client import ApiClient
    from customer_admin.services.tenant_reconciler import TenantCompanyReconciler
"""
