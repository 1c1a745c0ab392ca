"""Session wiring: settings → token store → API client → auth → services.

Every console session runs inside ``open_context()``. Startup restores the
signed-in user from the stored token; shutdown detaches the auth handler
and closes both HTTP clients.
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncGenerator

import httpx
import structlog

from customer_admin.core.config import Settings, settings as default_settings
from customer_admin.services.api_client import ApiClient
from customer_admin.services.attachments import AttachmentService
from customer_admin.services.auth import AuthContext
from customer_admin.services.customers import CustomerService
from customer_admin.services.dashboard import DashboardService
from customer_admin.services.feasibility import FeasibilityStudyService
from customer_admin.services.sales_reps import SalesRepService
from customer_admin.services.staff import EngineerService, SalesmanService
from customer_admin.services.token_store import FileTokenStore, TokenStore

logger = structlog.get_logger(__name__)


@dataclass
class AdminContext:
    settings: Settings
    api: ApiClient
    auth: AuthContext
    customers: CustomerService
    attachments: AttachmentService
    salesmen: SalesmanService
    engineers: EngineerService
    sales_reps: SalesRepService
    dashboard: DashboardService
    feasibility: FeasibilityStudyService


@asynccontextmanager
async def open_context(
    config: Settings | None = None,
    token_store: TokenStore | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    supabase_transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncGenerator[AdminContext, None]:
    """Build the services for one session and tear them down afterwards."""
    config = config or default_settings
    token_store = token_store or FileTokenStore(config.token_store_path)

    api = ApiClient(
        config.api_base_url,
        token_store,
        timeout=config.http_timeout_seconds,
        transport=transport,
    )
    auth = AuthContext(api, token_store)
    customers = CustomerService(api)
    salesmen = SalesmanService(api)
    engineers = EngineerService(api)
    sales_reps = SalesRepService(
        config.supabase_url,
        config.supabase_anon_key,
        timeout=config.http_timeout_seconds,
        transport=supabase_transport,
    )
    context = AdminContext(
        settings=config,
        api=api,
        auth=auth,
        customers=customers,
        attachments=AttachmentService(api, max_size_bytes=config.max_upload_size_bytes),
        salesmen=salesmen,
        engineers=engineers,
        sales_reps=sales_reps,
        dashboard=DashboardService(customers, salesmen, engineers),
        feasibility=FeasibilityStudyService(api),
    )

    # --- Startup ---
    auth.start()
    logger.debug("context_started", api_base_url=config.api_base_url)

    try:
        yield context
    finally:
        # --- Shutdown ---
        auth.close()
        await api.close()
        await sales_reps.close()
        logger.debug("context_closed")
