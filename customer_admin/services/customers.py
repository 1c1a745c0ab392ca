"""Customer (수용가) records on the backend.

Writes follow the same shape:
  - a duplicate company-name check runs first whenever the name is new
  - one request carries the whole change (create, or a single PATCH)
  - the record is re-fetched wholesale afterwards; nothing is merged locally
"""

from typing import Any, Iterable

import structlog

from customer_admin.core.endpoints import CustomerEndpoints
from customer_admin.core.exceptions import DuplicateCompanyNameError
from customer_admin.forms.customer import CustomerForm
from customer_admin.schemas.customer import (
    CompanyNameCheck,
    Customer,
    CustomerCreateRequest,
    CustomerListItem,
    CustomerUpdateRequest,
    TenantCompanyInput,
)
from customer_admin.schemas.files import AttachmentFile
from customer_admin.services.api_client import ApiClient, parse_response, unwrap_data, unwrap_list
from customer_admin.services.tenant_reconciler import TenantCompanyReconciler

logger = structlog.get_logger(__name__)


class CustomerService:
    def __init__(self, api: ApiClient) -> None:
        self._api = api

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def list_customers(self) -> list[CustomerListItem]:
        """All customers (admin view)."""
        body = await self._api.get(CustomerEndpoints.LIST)
        return [parse_response(CustomerListItem, row) for row in unwrap_list(body, "customerList")]

    async def list_user_customers(self) -> list[CustomerListItem]:
        """Customers visible to the signed-in non-admin user."""
        body = await self._api.get(CustomerEndpoints.USER_LIST)
        return [parse_response(CustomerListItem, row) for row in unwrap_list(body, "customerList")]

    async def get_customer(self, customer_id: int) -> Customer:
        body = await self._api.get(CustomerEndpoints.detail(customer_id))
        customer = parse_response(Customer, unwrap_data(body))
        if customer.customer_id is None:
            customer = customer.model_copy(update={"customer_id": customer_id})
        return customer

    async def check_company_name(self, company_name: str) -> CompanyNameCheck:
        body = await self._api.get(
            CustomerEndpoints.CHECK_COMPANY_NAME,
            params={"companyName": company_name},
        )
        return parse_response(CompanyNameCheck, unwrap_data(body))

    async def ensure_company_name_available(self, company_name: str) -> None:
        """Raise DuplicateCompanyNameError, naming the owning salesman, when taken."""
        check = await self.check_company_name(company_name)
        if check.possible:
            return
        logger.info("company_name_taken", company_name=company_name)
        raise DuplicateCompanyNameError(
            company_name,
            salesman_name=check.salesman_name,
            salesman_phone_number=check.salesman_phone_number,
            salesman_email=check.salesman_email,
        )

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create_customer(
        self,
        form: CustomerForm,
        tenant_rows: Iterable[TenantCompanyInput] = (),
        attachments: Iterable[AttachmentFile] = (),
        verify_name: bool = True,
    ) -> CustomerCreateRequest:
        """Create a customer from the form, its tenant rows and staged uploads.

        Pass ``verify_name=False`` when the caller already ran
        ensure_company_name_available for this name. Returns the request
        that was sent.
        """
        request = form.to_create_request(tuple(tenant_rows), tuple(attachments))
        if verify_name:
            await self.ensure_company_name_available(request.company_name)
        await self._api.post(CustomerEndpoints.CREATE, request.to_payload())
        logger.info(
            "customer_created",
            company_name=request.company_name,
            tenants=len(request.tenant_company_list),
            attachments=len(request.attachment_file_list),
        )
        return request

    async def update_customer(
        self,
        customer: Customer,
        reconciler: TenantCompanyReconciler | None = None,
        changes: dict[str, Any] | None = None,
        new_attachments: Iterable[AttachmentFile] = (),
        deleted_file_ids: Iterable[int] = (),
    ) -> Customer:
        """Flush scalar edits and staged tenant/file changes in one PATCH.

        The reconciler is only read, so after a failed request its staged
        edits are intact and the save can be retried. Returns the re-fetched
        record.
        """
        changes = dict(changes or {})
        new_name = changes.get("company_name")
        if new_name is not None and new_name != customer.company_name:
            await self.ensure_company_name_available(new_name)

        if reconciler is not None:
            diff = reconciler.resolve()
            changes.update(
                is_tenant_factory=diff.is_tenant_factory,
                new_tenant_company_list=diff.new_tenant_company_list,
                delete_tenant_company_list=diff.delete_tenant_company_list,
            )
        changes["new_attachment_file_list"] = list(new_attachments)
        changes["delete_attachment_file_list"] = list(deleted_file_ids)

        request = CustomerUpdateRequest.from_customer(customer, **changes)
        await self._api.patch(CustomerEndpoints.detail(customer.customer_id), request.to_payload())
        logger.info(
            "customer_updated",
            customer_id=customer.customer_id,
            new_tenants=len(request.new_tenant_company_list),
            deleted_tenants=len(request.delete_tenant_company_list),
        )
        return await self.get_customer(customer.customer_id)

    async def delete_customer(self, customer_id: int) -> None:
        await self._api.delete(CustomerEndpoints.detail(customer_id))
        logger.info("customer_deleted", customer_id=customer_id)
