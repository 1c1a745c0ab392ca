"""Unit tests for TenantCompanyReconciler.

Tests:
  - add assigns a negative id and lists the row once in both views
  - rapid successive adds never share an id
  - missing fields and duplicate names are rejected without mutation
  - removing a persisted row queues its id exactly once
  - removing a pending row drops it from the additions
  - enabling single occupancy prompts only when rows exist and clears all rows
  - a cancelled confirmation leaves every bucket untouched
  - a record already flagged single-occupancy with leftover rows can be cleared
  - resolve() yields the two wire arrays without synthetic ids
"""

from __future__ import annotations

import pytest

from customer_admin.core.exceptions import (
    DuplicateTenantCompanyError,
    TenantCompanyNotFoundError,
    TenantCompanyValidationError,
)
from customer_admin.schemas.customer import Customer, TenantCompany
from customer_admin.services.tenant_reconciler import (
    Added,
    Deleted,
    Existing,
    TenantCompanyReconciler,
)


def _persisted(*names: str) -> list[TenantCompany]:
    return [
        TenantCompany(id=index + 1, name=name, january_usage=100, august_usage=50)
        for index, name in enumerate(names)
    ]


class _Confirm:
    """Records how often the confirmation prompt was shown."""

    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return self.answer


class TestAdd:
    """Tests for TenantCompanyReconciler.add()."""

    def test_add_assigns_negative_id(self) -> None:
        """A staged row gets a negative id and shows up once in each view."""
        reconciler = TenantCompanyReconciler(_persisted("A상사"))

        tenant = reconciler.add("C유통", 10, 20)

        assert tenant.id < 0
        assert [t.id for t in reconciler.new_tenant_companies].count(tenant.id) == 1
        assert [t.id for t in reconciler.tenant_company_list].count(tenant.id) == 1
        assert isinstance(reconciler.entries[-1], Added)

    def test_rapid_adds_get_distinct_ids(self) -> None:
        """Ids come from a counter, so back-to-back adds never collide."""
        reconciler = TenantCompanyReconciler()

        ids = [reconciler.add(f"업체{i}", 1, 1).id for i in range(50)]

        assert len(set(ids)) == 50
        assert all(i < 0 for i in ids)

    @pytest.mark.parametrize(
        "name, jan, aug",
        [(None, 1, 1), ("", 1, 1), ("   ", 1, 1), ("A", None, 1), ("A", 1, None)],
    )
    def test_missing_fields_rejected(self, name, jan, aug) -> None:
        """All three fields are required."""
        reconciler = TenantCompanyReconciler()

        with pytest.raises(TenantCompanyValidationError):
            reconciler.add(name, jan, aug)

        assert reconciler.entries == ()

    def test_negative_usage_rejected(self) -> None:
        reconciler = TenantCompanyReconciler()

        with pytest.raises(TenantCompanyValidationError):
            reconciler.add("A", -1, 0)

    def test_duplicate_of_persisted_name_rejected(self) -> None:
        """A name already shown (persisted) cannot be added again."""
        reconciler = TenantCompanyReconciler(_persisted("A상사", "B물산"))
        before = reconciler.entries

        with pytest.raises(DuplicateTenantCompanyError):
            reconciler.add("B물산", 1, 1)

        assert reconciler.entries == before

    def test_duplicate_of_pending_name_rejected(self) -> None:
        reconciler = TenantCompanyReconciler()
        reconciler.add("C유통", 1, 1)
        before = reconciler.entries

        with pytest.raises(DuplicateTenantCompanyError):
            reconciler.add("C유통", 5, 5)

        assert reconciler.entries == before

    def test_duplicate_check_is_case_sensitive(self) -> None:
        """'abc' and 'ABC' are different companies."""
        reconciler = TenantCompanyReconciler(_persisted("abc"))

        tenant = reconciler.add("ABC", 1, 1)

        assert tenant.name == "ABC"
        assert len(reconciler.tenant_company_list) == 2

    def test_name_of_deleted_row_can_be_reused(self) -> None:
        """A row queued for deletion is no longer shown, so its name is free."""
        reconciler = TenantCompanyReconciler(_persisted("A상사"))
        reconciler.remove(1)

        reconciler.add("A상사", 3, 3)

        assert reconciler.deleted_tenant_company_ids == [1]
        assert [t.name for t in reconciler.new_tenant_companies] == ["A상사"]

    def test_add_refused_for_single_occupancy(self) -> None:
        reconciler = TenantCompanyReconciler(single_occupancy=True)

        with pytest.raises(TenantCompanyValidationError):
            reconciler.add("A", 1, 1)

    def test_add_refused_for_flagged_record_with_rows(self) -> None:
        """Leftover rows on a self-used factory do not reopen it for additions."""
        reconciler = TenantCompanyReconciler(_persisted("A상사"), single_occupancy=True)

        with pytest.raises(TenantCompanyValidationError):
            reconciler.add("B물산", 1, 1)

        assert reconciler.new_tenant_companies == []


class TestRemove:
    """Tests for TenantCompanyReconciler.remove()."""

    def test_remove_persisted_queues_id_once(self) -> None:
        """The id appears exactly once in the deletions and not in the display list."""
        reconciler = TenantCompanyReconciler(_persisted("A상사", "B물산"))

        reconciler.remove(2)
        reconciler.remove(2)

        assert reconciler.deleted_tenant_company_ids == [2]
        assert 2 not in [t.id for t in reconciler.tenant_company_list]
        assert Deleted(tenant_id=2) in reconciler.entries

    def test_remove_pending_drops_addition(self) -> None:
        """A pending row simply disappears; nothing is queued for deletion."""
        reconciler = TenantCompanyReconciler(_persisted("A상사"))
        tenant = reconciler.add("C유통", 1, 1)

        reconciler.remove(tenant.id)

        assert reconciler.new_tenant_companies == []
        assert reconciler.deleted_tenant_company_ids == []
        assert [t.name for t in reconciler.tenant_company_list] == ["A상사"]

    def test_remove_one_of_two_pending_rows(self) -> None:
        reconciler = TenantCompanyReconciler()
        first = reconciler.add("C유통", 1, 1)
        second = reconciler.add("D건설", 2, 2)

        reconciler.remove(first.id)

        assert reconciler.new_tenant_companies == [second]

    def test_remove_unknown_id_raises(self) -> None:
        reconciler = TenantCompanyReconciler(_persisted("A상사"))

        with pytest.raises(TenantCompanyNotFoundError):
            reconciler.remove(99)
        with pytest.raises(TenantCompanyNotFoundError):
            reconciler.remove(-5)


class TestSingleOccupancy:
    """Tests for TenantCompanyReconciler.set_single_occupancy()."""

    def test_no_rows_no_prompt(self) -> None:
        """Enabling with zero rows never asks for confirmation."""
        reconciler = TenantCompanyReconciler()
        confirm = _Confirm(answer=False)

        assert reconciler.set_single_occupancy(True, confirm) is True

        assert confirm.calls == 0
        assert reconciler.single_occupancy is True

    def test_pending_row_prompts(self) -> None:
        """A pending row alone is enough to require confirmation."""
        reconciler = TenantCompanyReconciler()
        reconciler.add("C유통", 1, 1)
        confirm = _Confirm(answer=True)

        reconciler.set_single_occupancy(True, confirm)

        assert confirm.calls == 1

    def test_confirm_clears_all_rows(self) -> None:
        """Persisted ids move to the deletion set; pending rows are discarded."""
        reconciler = TenantCompanyReconciler(_persisted("A상사", "B물산"))
        reconciler.add("C유통", 1, 1)
        confirm = _Confirm(answer=True)

        assert reconciler.set_single_occupancy(True, confirm) is True

        assert confirm.calls == 1
        assert reconciler.tenant_company_list == []
        assert reconciler.new_tenant_companies == []
        assert sorted(reconciler.deleted_tenant_company_ids) == [1, 2]
        assert reconciler.single_occupancy is True

    def test_already_deleted_id_not_duplicated(self) -> None:
        reconciler = TenantCompanyReconciler(_persisted("A상사", "B물산"))
        reconciler.remove(1)

        reconciler.set_single_occupancy(True, _Confirm(answer=True))

        assert sorted(reconciler.deleted_tenant_company_ids) == [1, 2]

    def test_cancel_leaves_state_unchanged(self) -> None:
        reconciler = TenantCompanyReconciler(_persisted("A상사"))
        reconciler.add("C유통", 1, 1)
        before = reconciler.entries

        assert reconciler.set_single_occupancy(True, _Confirm(answer=False)) is False

        assert reconciler.entries == before
        assert reconciler.single_occupancy is False

    def test_disable_needs_no_prompt(self) -> None:
        reconciler = TenantCompanyReconciler(single_occupancy=True)
        confirm = _Confirm(answer=False)

        assert reconciler.set_single_occupancy(False, confirm) is True

        assert confirm.calls == 0
        assert reconciler.single_occupancy is False

    def test_flagged_record_with_rows_can_be_cleared(self) -> None:
        """A record flagged self-used that still lists rows queues them on re-enable."""
        reconciler = TenantCompanyReconciler(_persisted("A상사"), single_occupancy=True)
        confirm = _Confirm(answer=True)

        assert reconciler.set_single_occupancy(True, confirm) is True

        assert confirm.calls == 1
        assert reconciler.tenant_company_list == []
        assert reconciler.resolve().delete_tenant_company_list == [1]

    def test_flagged_record_without_rows_is_a_no_op(self) -> None:
        reconciler = TenantCompanyReconciler(single_occupancy=True)
        confirm = _Confirm(answer=True)

        assert reconciler.set_single_occupancy(True, confirm) is True

        assert confirm.calls == 0
        assert not reconciler.is_dirty


class TestResolve:
    """Tests for TenantCompanyReconciler.resolve()."""

    def test_untouched_reconciler_resolves_empty(self) -> None:
        reconciler = TenantCompanyReconciler(_persisted("A상사"))

        diff = reconciler.resolve()

        assert diff.is_empty
        assert reconciler.is_dirty is False

    def test_resolve_strips_synthetic_ids(self) -> None:
        """Pending rows go out as {name, januaryUsage, augustUsage}."""
        reconciler = TenantCompanyReconciler(_persisted("A상사", "B물산"))
        reconciler.add("C유통", 10, 0)
        reconciler.remove(1)

        diff = reconciler.resolve()

        assert [row.to_payload() for row in diff.new_tenant_company_list] == [
            {"name": "C유통", "januaryUsage": 10.0, "augustUsage": 0.0}
        ]
        assert diff.delete_tenant_company_list == [1]
        assert diff.is_tenant_factory is False

    def test_resolve_does_not_mutate(self) -> None:
        """Calling resolve twice gives the same diff; staged edits stay for a retry."""
        reconciler = TenantCompanyReconciler(_persisted("A상사"))
        reconciler.add("C유통", 1, 1)

        assert reconciler.resolve() == reconciler.resolve()
        assert len(reconciler.new_tenant_companies) == 1

    def test_from_customer(self, sample_customer: Customer) -> None:
        reconciler = TenantCompanyReconciler.from_customer(sample_customer)

        assert [t.id for t in reconciler.tenant_company_list] == [11, 12]
        assert all(isinstance(e, Existing) for e in reconciler.entries)
        assert reconciler.single_occupancy is False
