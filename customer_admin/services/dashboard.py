"""Dashboard summary figures.

Admins see totals across every customer, salesman and engineer. Other
users see only their own customers; the staff counts stay at zero.
"""

from pydantic import BaseModel, Field

from customer_admin.schemas.customer import OPEN_PROGRESS_STATUSES, CustomerListItem
from customer_admin.services.customers import CustomerService
from customer_admin.services.staff import EngineerService, SalesmanService

ADMIN_ROLE = "ADMIN"
RECENT_CUSTOMER_LIMIT = 5


class DashboardStats(BaseModel):
    total_customers: int = 0
    active_salesmen: int = 0
    total_engineers: int = 0
    in_progress_projects: int = 0
    recent_customers: list[CustomerListItem] = Field(default_factory=list)


class DashboardService:
    def __init__(
        self,
        customers: CustomerService,
        salesmen: SalesmanService,
        engineers: EngineerService,
    ) -> None:
        self._customers = customers
        self._salesmen = salesmen
        self._engineers = engineers

    async def load(self, role: str) -> DashboardStats:
        """Fetch lists one after another and summarize them for ``role``."""
        if role == ADMIN_ROLE:
            customers = await self._customers.list_customers()
            salesmen = await self._salesmen.list_salesmen()
            engineers = await self._engineers.list_engineers()
            return summarize(customers, len(salesmen), len(engineers))

        customers = await self._customers.list_user_customers()
        return summarize(customers)


def summarize(
    customers: list[CustomerListItem],
    salesman_count: int = 0,
    engineer_count: int = 0,
) -> DashboardStats:
    """REQUESTED and IN_PROGRESS both count as open projects."""
    in_progress = sum(1 for c in customers if c.progress_status in OPEN_PROGRESS_STATUSES)
    return DashboardStats(
        total_customers=len(customers),
        active_salesmen=salesman_count,
        total_engineers=engineer_count,
        in_progress_projects=in_progress,
        recent_customers=customers[:RECENT_CUSTOMER_LIMIT],
    )
