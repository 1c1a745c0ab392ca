"""
Customer admin console CLI

Commands:
- login / logout / whoami: session management
- dashboard: summary figures for the signed-in user
- customers: list, show, create, delete, tenants, attach, detach, file-url,
  feasibility
- salesmen / engineers: list, create, update, delete (admin only)
- sales-reps: list, create, update, delete (admin only)

Every command runs inside one console session (see customer_admin.context).
Errors are printed as localized messages; the exit code is 1 on failure.
"""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, TypeVar

import structlog
import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from customer_admin.context import AdminContext, open_context
from customer_admin.core.config import settings
from customer_admin.core.exceptions import AdminConsoleError, FormValidationError
from customer_admin.core.formatting import format_currency, format_file_size
from customer_admin.core.messages import (
    BUILDING_TYPE_LABELS,
    FEASIBILITY_STATUS_LABELS,
    FILE_CATEGORY_LABELS,
    PROGRESS_STATUS_LABELS,
    SETTLEMENT_METHOD_LABELS,
    describe_error,
)
from customer_admin.forms.base import UsernameInput, validate_form
from customer_admin.forms.customer import CustomerForm, parse_tenant_rows
from customer_admin.forms.feasibility import FeasibilityStudyForm
from customer_admin.forms.staff import EngineerForm, SalesmanForm, SalesRepForm
from customer_admin.schemas.customer import Customer
from customer_admin.schemas.feasibility import FeasibilityStudy
from customer_admin.schemas.files import FileCategory, LocalFile
from customer_admin.services.dashboard import ADMIN_ROLE
from customer_admin.services.tenant_reconciler import TenantCompanyReconciler


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.is_production
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


_configure_logging()

T = TypeVar("T")

app = typer.Typer(
    name="customer-admin",
    help="Electricity-contract-reduction customer admin console",
)
customers_app = typer.Typer(help="수용가 관리")
salesmen_app = typer.Typer(help="영업자 관리 (관리자 전용)")
engineers_app = typer.Typer(help="기술사 관리 (관리자 전용)")
sales_reps_app = typer.Typer(help="영업 담당자 관리 (관리자 전용)")
app.add_typer(customers_app, name="customers")
app.add_typer(salesmen_app, name="salesmen")
app.add_typer(engineers_app, name="engineers")
app.add_typer(sales_reps_app, name="sales-reps")

console = Console()


def _run(operation: str, action: Callable[[AdminContext], Awaitable[T]]) -> T:
    """Run ``action`` inside a console session, printing failures for the user."""

    async def runner() -> T:
        async with open_context() as ctx:
            try:
                return await action(ctx)
            finally:
                if ctx.auth.redirect_to:
                    rprint("[yellow]세션이 만료되었습니다. 'customer-admin login'으로 다시 로그인해주세요.[/yellow]")

    try:
        return asyncio.run(runner())
    except FormValidationError as e:
        rprint(f"[red]{e.message}[/red]")
        for field, message in e.field_errors.items():
            rprint(f"  {escape(field)}: {escape(message)}")
        raise typer.Exit(1)
    except AdminConsoleError as e:
        rprint(f"[red]{describe_error(e, operation)}[/red]")
        raise typer.Exit(1)


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        rprint(f"[red]Cannot read {path}: {e}[/red]")
        raise typer.Exit(1)


def _local_file(path: Path) -> LocalFile:
    if not path.is_file():
        rprint(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    return LocalFile(name=path.name, content=path.read_bytes(), content_type="")


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


@app.command()
def login(
    username: str = typer.Option(..., prompt="아이디"),
    password: str = typer.Option(..., prompt="비밀번호", hide_input=True),
):
    """Sign in and store the access token."""
    box = UsernameInput(warning_seconds=settings.username_warning_seconds)
    box.type(username)
    if box.warning_message:
        rprint(f"[yellow]{box.warning_message}[/yellow] → {box.value}")

    user = _run("로그인", lambda ctx: ctx.auth.sign_in(box.value, password))
    rprint(f"[green]Signed in as {user.username} ({user.role})[/green]")


@app.command()
def logout():
    """Forget the stored access token."""

    async def action(ctx: AdminContext) -> None:
        ctx.auth.sign_out()

    _run("로그아웃", action)
    rprint("[green]Signed out[/green]")


@app.command()
def whoami():
    """Show the signed-in user."""

    async def action(ctx: AdminContext):
        return ctx.auth.require_user()

    user = _run("사용자 확인", action)
    rprint(f"{user.username} ({user.role})")


@app.command()
def dashboard():
    """Totals and the five most recent customers."""

    async def action(ctx: AdminContext):
        user = ctx.auth.require_role()
        return user, await ctx.dashboard.load(user.role)

    user, stats = _run("대시보드 조회", action)
    rprint(f"[bold]전체 수용가[/bold]: {stats.total_customers}")
    if user.role == ADMIN_ROLE:
        rprint(f"[bold]영업자[/bold]: {stats.active_salesmen}")
        rprint(f"[bold]기술사[/bold]: {stats.total_engineers}")
    rprint(f"[bold]진행 중 프로젝트[/bold]: {stats.in_progress_projects}")
    _print_customer_rows(stats.recent_customers, title="최근 수용가")


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------


def _print_customer_rows(rows, title: str) -> None:
    if not rows:
        rprint("[yellow]No customers found[/yellow]")
        return
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("업체명")
    table.add_column("대표자")
    table.add_column("건물형태")
    table.add_column("영업자")
    table.add_column("진행상황")
    for row in rows:
        table.add_row(
            str(row.customer_id),
            row.company_name,
            row.representative,
            BUILDING_TYPE_LABELS.get(row.building_type.value, "-") if row.building_type else "-",
            row.salesman_name or "-",
            PROGRESS_STATUS_LABELS.get(row.progress_status.value, "-") if row.progress_status else "-",
        )
    console.print(table)


def _print_customer(customer: Customer) -> None:
    rprint(f"[bold]{customer.company_name}[/bold] (#{customer.customer_id})")
    rprint(f"  대표자: {customer.representative}")
    rprint(f"  사업자등록번호: {customer.business_number}")
    rprint(f"  건물형태: {BUILDING_TYPE_LABELS.get(customer.building_type.value)}")
    rprint(f"  자가 공장: {'예' if customer.tenant_factory else '아니오'}")
    rprint(f"  진행상황: {PROGRESS_STATUS_LABELS.get(customer.progress_status.value)}")
    rprint(f"  사업비: {format_currency(customer.project_cost)}")
    rprint(f"  보조금: {format_currency(customer.subsidy)}")

    if customer.tenant_company_list:
        table = Table(title="임차 업체")
        table.add_column("ID", style="dim")
        table.add_column("업체명")
        table.add_column("1월 사용량", justify="right")
        table.add_column("8월 사용량", justify="right")
        for tenant in customer.tenant_company_list:
            table.add_row(str(tenant.id), tenant.name, f"{tenant.january_usage:g}", f"{tenant.august_usage:g}")
        console.print(table)

    if customer.customer_file_list:
        table = Table(title="첨부 파일")
        table.add_column("ID", style="dim")
        table.add_column("분류")
        table.add_column("파일명")
        table.add_column("크기", justify="right")
        for f in customer.customer_file_list:
            table.add_row(
                str(f.file_id),
                FILE_CATEGORY_LABELS.get(f.category.value, f.category.value),
                f.original_file_name,
                format_file_size(f.size),
            )
        console.print(table)


@customers_app.command("list")
def list_customers():
    """List customers (all for admins, assigned ones otherwise)."""

    async def action(ctx: AdminContext):
        user = ctx.auth.require_role()
        if user.role == ADMIN_ROLE:
            return await ctx.customers.list_customers()
        return await ctx.customers.list_user_customers()

    _print_customer_rows(_run("수용가 목록 조회", action), title="수용가")


@customers_app.command("show")
def show_customer(customer_id: int = typer.Argument(..., help="Customer ID")):
    """Show one customer with its tenant companies and attachments."""

    async def action(ctx: AdminContext):
        ctx.auth.require_role()
        return await ctx.customers.get_customer(customer_id)

    _print_customer(_run("수용가 조회", action))


@customers_app.command("create")
def create_customer(
    form_file: Path = typer.Argument(..., help="JSON file with the form fields"),
    attach: list[str] = typer.Option(
        [], "--attach", help="CATEGORY=PATH, e.g. BUSINESS_LICENSE=license.pdf"
    ),
):
    """
    Create a customer from a JSON form.

    Tenant rows go under "tenant_company_list" as
    {"name", "january_usage", "august_usage"} objects.
    """
    data = _load_json(form_file)
    if not isinstance(data, dict):
        rprint(f"[red]Expected a JSON object in {form_file}[/red]")
        raise typer.Exit(1)
    raw_rows = data.pop("tenant_company_list", [])
    files: list[tuple[FileCategory, LocalFile]] = []
    for item in attach:
        category, _, path = item.partition("=")
        try:
            files.append((FileCategory(category.upper()), _local_file(Path(path))))
        except ValueError:
            rprint(f"[red]Unknown category: {category}[/red]")
            raise typer.Exit(1)

    async def action(ctx: AdminContext):
        ctx.auth.require_role()
        form = validate_form(CustomerForm, data)
        rows = parse_tenant_rows(raw_rows)
        # tenant rows and the company name are checked before anything is uploaded
        form.to_create_request(rows)
        await ctx.customers.ensure_company_name_available(form.company_name)
        staged = await ctx.attachments.stage(files)
        return await ctx.customers.create_customer(form, rows, staged, verify_name=False)

    request = _run("수용가 등록", action)
    rprint(f"[green]Created customer {request.company_name}[/green]")
    rprint(f"  Tenant companies: {len(request.tenant_company_list)}")
    rprint(f"  Attachments: {len(request.attachment_file_list)}")


@customers_app.command("delete")
def delete_customer(
    customer_id: int = typer.Argument(..., help="Customer ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """Delete a customer."""
    if not force and not typer.confirm("정말로 이 수용가를 삭제하시겠습니까?"):
        rprint("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    async def action(ctx: AdminContext):
        ctx.auth.require_role()
        await ctx.customers.delete_customer(customer_id)

    _run("수용가 삭제", action)
    rprint("[green]Customer deleted[/green]")


def _parse_tenant(text: str) -> tuple[str, float, float]:
    name, jan, aug = (text.rsplit(":", 2) + ["", ""])[:3]
    try:
        return name, float(jan), float(aug)
    except ValueError:
        rprint(f"[red]Expected NAME:JANUARY:AUGUST, got {text!r}[/red]")
        raise typer.Exit(1)


@customers_app.command("tenants")
def edit_tenants(
    customer_id: int = typer.Argument(..., help="Customer ID"),
    add: list[str] = typer.Option([], "--add", help="NAME:JANUARY:AUGUST"),
    remove: list[int] = typer.Option([], "--remove", help="Tenant company ID"),
    single_occupancy: Optional[bool] = typer.Option(
        None, "--single-occupancy/--shared", help="Mark the factory as self-used or shared"
    ),
):
    """
    Edit a factory's tenant companies and save them in one update.

    Removals run first, then the occupancy flag, then additions.
    """
    additions = [_parse_tenant(text) for text in add]

    async def action(ctx: AdminContext):
        ctx.auth.require_role()
        customer = await ctx.customers.get_customer(customer_id)
        reconciler = TenantCompanyReconciler.from_customer(customer)

        for tenant_id in remove:
            reconciler.remove(tenant_id)
        if single_occupancy is not None:
            applied = reconciler.set_single_occupancy(
                single_occupancy,
                confirm=lambda: typer.confirm(
                    "자가 공장으로 변경하면 등록된 임차 업체가 모두 삭제됩니다. 계속하시겠습니까?"
                ),
            )
            if not applied:
                return None
        for name, jan, aug in additions:
            reconciler.add(name, jan, aug)

        if not reconciler.is_dirty and reconciler.single_occupancy == customer.tenant_factory:
            return customer
        return await ctx.customers.update_customer(customer, reconciler)

    customer = _run("임차 업체 저장", action)
    if customer is None:
        rprint("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)
    _print_customer(customer)


@customers_app.command("attach")
def attach_file(
    customer_id: int = typer.Argument(..., help="Customer ID"),
    category: FileCategory = typer.Argument(..., help="File category"),
    path: Path = typer.Argument(..., help="File to upload"),
):
    """Upload a file and register it on the customer."""
    local_file = _local_file(path)

    async def action(ctx: AdminContext):
        ctx.auth.require_role()
        customer = await ctx.customers.get_customer(customer_id)
        return await ctx.attachments.attach(customer, local_file, category)

    attachment = _run("파일 업로드", action)
    rprint(f"[green]Attached {attachment.original_file_name}[/green] ({format_file_size(attachment.size)})")


@customers_app.command("detach")
def detach_file(
    customer_id: int = typer.Argument(..., help="Customer ID"),
    file_id: int = typer.Argument(..., help="Attachment file ID"),
):
    """Remove an attachment from the customer."""

    async def action(ctx: AdminContext):
        ctx.auth.require_role()
        customer = await ctx.customers.get_customer(customer_id)
        await ctx.attachments.detach(customer, file_id)

    _run("파일 삭제", action)
    rprint("[green]Attachment removed[/green]")


@customers_app.command("file-url")
def file_url(
    customer_id: int = typer.Argument(..., help="Customer ID"),
    file_id: int = typer.Argument(..., help="Attachment file ID"),
):
    """Print a short-lived view URL for an attachment."""

    async def action(ctx: AdminContext):
        ctx.auth.require_role()
        customer = await ctx.customers.get_customer(customer_id)
        match = next((f for f in customer.customer_file_list if f.file_id == file_id), None)
        if match is None:
            return None
        return await ctx.attachments.view_url(file_id, match.file_key)

    view = _run("파일 조회", action)
    if view is None:
        rprint(f"[red]No attachment {file_id} on customer {customer_id}[/red]")
        raise typer.Exit(1)
    rprint(view.file_view_url)


def _print_feasibility(study: FeasibilityStudy) -> None:
    rprint(f"[bold]타당성 검토 의뢰서[/bold] (#{study.id})")
    rprint(f"  신청일: {study.request_date.isoformat()}")
    if study.target_completion_date:
        rprint(f"  완료 목표일: {study.target_completion_date.isoformat()}")
    rprint(f"  상태: {FEASIBILITY_STATUS_LABELS.get(study.status.value, study.status.value)}")
    if study.expected_cost_reduction is not None:
        rprint(f"  예상 절감액: {format_currency(study.expected_cost_reduction)}")
    if study.project_description:
        rprint(f"  사업 내용: {escape(study.project_description)}")
    if study.review_comments:
        rprint(f"  검토 의견: {escape(study.review_comments)}")


@customers_app.command("feasibility")
def feasibility_study(
    customer_id: int = typer.Argument(..., help="Customer ID"),
    form_file: Optional[Path] = typer.Option(
        None, "--set", help="JSON file with the study fields to save"
    ),
    delete: bool = typer.Option(False, "--delete", help="Delete the customer's study"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """
    Show, save or delete the customer's feasibility study.

    With --set the study is updated when one exists and registered
    otherwise; fields missing from the file keep their current value.
    """
    if form_file is not None and delete:
        rprint("[red]--set and --delete cannot be combined[/red]")
        raise typer.Exit(1)
    changes = _load_json(form_file) if form_file is not None else None
    if changes is not None and not isinstance(changes, dict):
        rprint(f"[red]Expected a JSON object in {form_file}[/red]")
        raise typer.Exit(1)
    if delete and not force and not typer.confirm("타당성 검토 의뢰서를 삭제하시겠습니까?"):
        rprint("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    async def action(ctx: AdminContext):
        ctx.auth.require_role()
        current = await ctx.feasibility.get_for_customer(customer_id)
        if changes is None and not delete:
            return current
        if delete:
            if current is not None:
                await ctx.feasibility.delete_study(current.id)
            return current
        initial = FeasibilityStudyForm.initial_from(current) if current else {}
        form = validate_form(FeasibilityStudyForm, {**initial, **changes})
        return await ctx.feasibility.save_for_customer(customer_id, form, existing=current)

    result = _run("타당성 검토 의뢰서 처리", action)
    if delete:
        if result is None:
            rprint(f"[yellow]Customer {customer_id} has no feasibility study[/yellow]")
        else:
            rprint("[green]Feasibility study deleted[/green]")
    elif changes is not None:
        rprint(f"[green]Feasibility study saved[/green] ({result.request_date.isoformat()})")
    elif result is None:
        rprint(f"[yellow]Customer {customer_id} has no feasibility study[/yellow]")
    else:
        _print_feasibility(result)


# ---------------------------------------------------------------------------
# Salesmen / engineers
# ---------------------------------------------------------------------------


@salesmen_app.command("list")
def list_salesmen():
    """List salesmen."""

    async def action(ctx: AdminContext):
        ctx.auth.require_role(ADMIN_ROLE)
        return await ctx.salesmen.list_salesmen()

    salesmen = _run("영업자 목록 조회", action)
    table = Table(title="영업자")
    table.add_column("ID", style="dim")
    table.add_column("아이디")
    table.add_column("이름")
    table.add_column("연락처")
    table.add_column("수수료율", justify="right")
    table.add_column("정산 방식")
    for s in salesmen:
        table.add_row(
            str(s.id),
            s.user_id,
            s.name or "-",
            s.phone_number,
            f"{s.commission_rate:g}%",
            SETTLEMENT_METHOD_LABELS.get(s.settlement_method.value, "-"),
        )
    console.print(table)


@salesmen_app.command("create")
def create_salesman(form_file: Path = typer.Argument(..., help="JSON file with the form fields")):
    """Register a salesman account."""
    data = _load_json(form_file)

    async def action(ctx: AdminContext):
        ctx.auth.require_role(ADMIN_ROLE)
        return await ctx.salesmen.create_salesman(validate_form(SalesmanForm, data))

    request = _run("영업자 등록", action)
    rprint(f"[green]Created salesman {request.username}[/green]")


@salesmen_app.command("update")
def update_salesman(
    salesman_id: int = typer.Argument(..., help="Salesman ID"),
    form_file: Path = typer.Argument(..., help="JSON file with the changed fields"),
):
    """Update a salesman; fields missing from the file keep their current value."""
    changes = _load_json(form_file)

    async def action(ctx: AdminContext):
        ctx.auth.require_role(ADMIN_ROLE)
        current = await ctx.salesmen.get_salesman(salesman_id)
        data = {**SalesmanForm.initial_from(current), **changes}
        return await ctx.salesmen.update_salesman(salesman_id, validate_form(SalesmanForm, data))

    _run("영업자 수정", action)
    rprint("[green]Salesman updated[/green]")


@salesmen_app.command("delete")
def delete_salesman(
    salesman_id: int = typer.Argument(..., help="Salesman ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """Delete a salesman."""
    if not force and not typer.confirm("정말로 이 영업자를 삭제하시겠습니까?"):
        rprint("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    async def action(ctx: AdminContext):
        ctx.auth.require_role(ADMIN_ROLE)
        await ctx.salesmen.delete_salesman(salesman_id)

    _run("영업자 삭제", action)
    rprint("[green]Salesman deleted[/green]")


@engineers_app.command("list")
def list_engineers():
    """List engineers."""

    async def action(ctx: AdminContext):
        ctx.auth.require_role(ADMIN_ROLE)
        return await ctx.engineers.list_engineers()

    engineers = _run("기술사 목록 조회", action)
    table = Table(title="기술사")
    table.add_column("ID", style="dim")
    table.add_column("아이디")
    table.add_column("이름")
    table.add_column("연락처")
    table.add_column("이메일")
    for e in engineers:
        table.add_row(str(e.id), e.user_id, e.name, e.phone_number, e.email)
    console.print(table)


@engineers_app.command("create")
def create_engineer(form_file: Path = typer.Argument(..., help="JSON file with the form fields")):
    """Register an engineer account."""
    data = _load_json(form_file)

    async def action(ctx: AdminContext):
        ctx.auth.require_role(ADMIN_ROLE)
        return await ctx.engineers.create_engineer(validate_form(EngineerForm, data))

    request = _run("기술사 등록", action)
    rprint(f"[green]Created engineer {request.username}[/green]")


@engineers_app.command("update")
def update_engineer(
    engineer_id: int = typer.Argument(..., help="Engineer ID"),
    form_file: Path = typer.Argument(..., help="JSON file with the form fields"),
):
    """Update an engineer."""
    data = _load_json(form_file)

    async def action(ctx: AdminContext):
        ctx.auth.require_role(ADMIN_ROLE)
        return await ctx.engineers.update_engineer(engineer_id, validate_form(EngineerForm, data))

    _run("기술사 수정", action)
    rprint("[green]Engineer updated[/green]")


@engineers_app.command("delete")
def delete_engineer(
    engineer_id: int = typer.Argument(..., help="Engineer ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """Delete an engineer."""
    if not force and not typer.confirm("정말로 이 기술사를 삭제하시겠습니까?"):
        rprint("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    async def action(ctx: AdminContext):
        ctx.auth.require_role(ADMIN_ROLE)
        await ctx.engineers.delete_engineer(engineer_id)

    _run("기술사 삭제", action)
    rprint("[green]Engineer deleted[/green]")


# ---------------------------------------------------------------------------
# Sales reps
# ---------------------------------------------------------------------------


@sales_reps_app.command("list")
def list_sales_reps():
    """List sales reps, newest first."""

    async def action(ctx: AdminContext):
        ctx.auth.require_role(ADMIN_ROLE)
        return await ctx.sales_reps.list_sales_reps()

    reps = _run("영업 담당자 목록 조회", action)
    table = Table(title="영업 담당자")
    table.add_column("ID", style="dim")
    table.add_column("이름")
    table.add_column("연락처")
    table.add_column("이메일")
    table.add_column("수수료율", justify="right")
    for rep in reps:
        table.add_row(rep.id, rep.name, rep.phone, rep.email, f"{rep.commission_rate:g}%")
    console.print(table)


@sales_reps_app.command("create")
def create_sales_rep(form_file: Path = typer.Argument(..., help="JSON file with the form fields")):
    """Add a sales rep."""
    data = _load_json(form_file)

    async def action(ctx: AdminContext):
        ctx.auth.require_role(ADMIN_ROLE)
        return await ctx.sales_reps.create_sales_rep(validate_form(SalesRepForm, data))

    _run("영업 담당자 등록", action)
    rprint("[green]Sales rep created[/green]")


@sales_reps_app.command("update")
def update_sales_rep(
    sales_rep_id: str = typer.Argument(..., help="Sales rep ID"),
    form_file: Path = typer.Argument(..., help="JSON file with the form fields"),
):
    """Update a sales rep."""
    data = _load_json(form_file)

    async def action(ctx: AdminContext):
        ctx.auth.require_role(ADMIN_ROLE)
        await ctx.sales_reps.update_sales_rep(sales_rep_id, validate_form(SalesRepForm, data))

    _run("영업 담당자 수정", action)
    rprint("[green]Sales rep updated[/green]")


@sales_reps_app.command("delete")
def delete_sales_rep(
    sales_rep_id: str = typer.Argument(..., help="Sales rep ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """Delete a sales rep."""
    if not force and not typer.confirm("정말로 이 영업자를 삭제하시겠습니까?"):
        rprint("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    async def action(ctx: AdminContext):
        ctx.auth.require_role(ADMIN_ROLE)
        await ctx.sales_reps.delete_sales_rep(sales_rep_id)

    _run("영업 담당자 삭제", action)
    rprint("[green]Sales rep deleted[/green]")


if __name__ == "__main__":
    app()
