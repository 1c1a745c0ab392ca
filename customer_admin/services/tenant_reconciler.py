"""Tenant-company edits staged against a customer record.

Edits to a factory's tenant companies are never sent one by one. They are
staged here and collapse into a single partial update carrying
``newTenantCompanyList`` and ``deleteTenantCompanyList``, so a save either
applies every change or none.

State is one ordered list of tagged entries:
  - Existing(tenant): a persisted row still shown
  - Added(temp_key, tenant): a row typed in the console, not yet saved;
    its id is a negative placeholder drawn from a per-instance counter
  - Deleted(tenant_id): a persisted row queued for deletion

The display list, pending additions and pending deletions are derived
views of that list.
"""

import itertools
from dataclasses import dataclass
from typing import Callable, Iterable, Union

import structlog

from customer_admin.core.exceptions import (
    DuplicateTenantCompanyError,
    TenantCompanyNotFoundError,
    TenantCompanyValidationError,
)
from customer_admin.schemas.customer import Customer, TenantCompany, TenantCompanyInput

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Existing:
    tenant: TenantCompany


@dataclass(frozen=True)
class Added:
    temp_key: int
    tenant: TenantCompany


@dataclass(frozen=True)
class Deleted:
    tenant_id: int


Entry = Union[Existing, Added, Deleted]


@dataclass(frozen=True)
class TenantCompanyDiff:
    """The wire arrays a save sends, plus the single-occupancy flag."""

    new_tenant_company_list: list[TenantCompanyInput]
    delete_tenant_company_list: list[int]
    is_tenant_factory: bool

    @property
    def is_empty(self) -> bool:
        return not self.new_tenant_company_list and not self.delete_tenant_company_list


class TenantCompanyReconciler:
    """Stages tenant-company additions and removals until the customer is saved."""

    def __init__(
        self,
        tenants: Iterable[TenantCompany] = (),
        single_occupancy: bool = False,
    ) -> None:
        self._entries: list[Entry] = [Existing(tenant) for tenant in tenants]
        self._temp_keys = itertools.count(1)
        self._single_occupancy = single_occupancy

    @classmethod
    def from_customer(cls, customer: Customer) -> "TenantCompanyReconciler":
        """Fresh staging area for a record just fetched from the backend."""
        return cls(customer.tenant_company_list, single_occupancy=customer.tenant_factory)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    @property
    def single_occupancy(self) -> bool:
        return self._single_occupancy

    @property
    def tenant_company_list(self) -> list[TenantCompany]:
        """Rows to display: persisted ones still kept plus pending additions."""
        return [
            entry.tenant
            for entry in self._entries
            if isinstance(entry, (Existing, Added))
        ]

    @property
    def new_tenant_companies(self) -> list[TenantCompany]:
        return [entry.tenant for entry in self._entries if isinstance(entry, Added)]

    @property
    def deleted_tenant_company_ids(self) -> list[int]:
        return [entry.tenant_id for entry in self._entries if isinstance(entry, Deleted)]

    @property
    def has_rows(self) -> bool:
        return bool(self.tenant_company_list)

    @property
    def is_dirty(self) -> bool:
        return any(isinstance(entry, (Added, Deleted)) for entry in self._entries)

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def add(
        self,
        name: str | None,
        january_usage: float | None,
        august_usage: float | None,
    ) -> TenantCompany:
        """Stage a new tenant company.

        Raises:
            TenantCompanyValidationError: A field is missing or negative, or
                the factory is marked single-occupancy.
            DuplicateTenantCompanyError: ``name`` equals (case-sensitively)
                the name of a row already shown.
        """
        if self._single_occupancy:
            raise TenantCompanyValidationError("자가 공장에는 임차 업체를 등록할 수 없습니다.")
        if name is None or not name.strip() or january_usage is None or august_usage is None:
            raise TenantCompanyValidationError()
        if january_usage < 0 or august_usage < 0:
            raise TenantCompanyValidationError("사용량은 0 이상이어야 합니다.")

        name = name.strip()
        if any(tenant.name == name for tenant in self.tenant_company_list):
            logger.info("tenant_company_duplicate", name=name)
            raise DuplicateTenantCompanyError(name)

        temp_key = -next(self._temp_keys)
        tenant = TenantCompany(
            id=temp_key,
            name=name,
            january_usage=january_usage,
            august_usage=august_usage,
        )
        self._entries.append(Added(temp_key=temp_key, tenant=tenant))
        logger.debug("tenant_company_staged", temp_key=temp_key)
        return tenant

    def remove(self, tenant_id: int) -> None:
        """Unstage a pending row, or queue a persisted row for deletion.

        Removing an already-queued persisted row again is a no-op.
        """
        for index, entry in enumerate(self._entries):
            if isinstance(entry, Existing) and entry.tenant.id == tenant_id:
                self._entries[index] = Deleted(tenant_id=tenant_id)
                logger.debug("tenant_company_deletion_queued", tenant_id=tenant_id)
                return
            if isinstance(entry, Added) and entry.temp_key == tenant_id:
                del self._entries[index]
                logger.debug("tenant_company_unstaged", temp_key=tenant_id)
                return
            if isinstance(entry, Deleted) and entry.tenant_id == tenant_id:
                return
        raise TenantCompanyNotFoundError(tenant_id)

    def set_single_occupancy(self, enabled: bool, confirm: Callable[[], bool]) -> bool:
        """Toggle the factory self-use flag.

        Enabling it clears every tenant row: persisted ids are queued for
        deletion and pending additions are discarded. When any row exists,
        ``confirm`` is asked first and a False answer leaves everything as
        it was. A record that arrives flagged but still lists rows is
        cleared the same way. Returns whether the flag now has the
        requested value.
        """
        if not enabled:
            self._single_occupancy = False
            return True
        if self._single_occupancy and not self.has_rows:
            return True

        if self.has_rows and not confirm():
            logger.info("single_occupancy_cancelled")
            return False

        cleared: list[Entry] = []
        for entry in self._entries:
            if isinstance(entry, Existing):
                cleared.append(Deleted(tenant_id=entry.tenant.id))
            elif isinstance(entry, Deleted):
                cleared.append(entry)
        self._entries = cleared
        self._single_occupancy = True
        logger.info(
            "single_occupancy_enabled",
            queued_deletions=len(self.deleted_tenant_company_ids),
        )
        return True

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def resolve(self) -> TenantCompanyDiff:
        """Collapse the staged edits into the arrays of one update request."""
        return TenantCompanyDiff(
            new_tenant_company_list=[tenant.to_input() for tenant in self.new_tenant_companies],
            delete_tenant_company_list=self.deleted_tenant_company_ids,
            is_tenant_factory=self._single_occupancy,
        )
