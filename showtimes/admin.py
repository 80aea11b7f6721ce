"""Admin use cases: login, user blocking, dashboard and sales reports."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

import bcrypt

from showtimes.errors import ERR_FIELD_EMPTY, ERR_INVALID_TIME_PERIOD, UseCaseError
from showtimes.models import (
    AdminDetailsResponse,
    AdminLogin,
    CompleteAdminDashboard,
    OrderDetailsAdmin,
    SalesReport,
    TokenAdmin,
    UpdateBlock,
    UserDetailsAtAdmin,
)
from showtimes.pdf import PdfDocument

_DATE_SHAPE = re.compile(r"\d{2}-\d{2}-\d{4}")
_ZERO_TIME = datetime(1, 1, 1)
_INTEGER = re.compile(r"[+-]?\d+")


def _atoi(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def _parse_date(text: str) -> datetime:
    if not _DATE_SHAPE.fullmatch(text):
        raise ValueError(text)
    return datetime.strptime(text, "%d-%m-%Y")


class AdminUseCase:
    """Business rules for the admin side of the shop.

    ``repository`` provides login_handler, is_user_exist, get_user_by_id,
    update_block_user_by_id, get_users, the dashboard_* queries,
    filtered_sales_report and sales_by_year/month/day. ``helper`` provides
    generate_token_admin (returning access and refresh tokens) and
    get_time_from_period (returning a start and end time).
    """

    def __init__(self, repository: Any, helper: Any) -> None:
        self.repository = repository
        self.helper = helper

    def login_handler(self, admin_details: AdminLogin) -> TokenAdmin:
        stored = self.repository.login_handler(admin_details)
        try:
            matches = bcrypt.checkpw(
                admin_details.password.encode(), stored.password.encode()
            )
        except ValueError as exc:
            raise UseCaseError("hashedSecret too short to be a bcrypted password") from exc
        if not matches:
            raise UseCaseError("hashedPassword is not the hash of the given password")
        details = AdminDetailsResponse(id=stored.id, name=stored.name, email=stored.email)
        access, _refresh = self.helper.generate_token_admin(details)
        return TokenAdmin(admin=details, access_token=access)

    def block_user(self, user_id: str) -> None:
        uid = _atoi(user_id)
        if not self.repository.is_user_exist(uid):
            raise UseCaseError("user not exist")
        user = self.repository.get_user_by_id(uid)
        if user.is_admin:
            raise UseCaseError("admin's id cannot be blocked")
        if user.blocked:
            raise UseCaseError("already blocked")
        self.repository.update_block_user_by_id(UpdateBlock(id=int(user.id), blocked=True))

    def unblock_user(self, user_id: str) -> None:
        user = self.repository.get_user_by_id(_atoi(user_id))
        if not user.blocked:
            raise UseCaseError("already unblocked")
        self.repository.update_block_user_by_id(UpdateBlock(id=int(user.id), blocked=False))

    def get_users(self, page: int) -> list[UserDetailsAtAdmin]:
        return self.repository.get_users(page)

    def admin_dashboard(self) -> CompleteAdminDashboard:
        users = self.repository.dashboard_user_details()
        products = self.repository.dashboard_product_details()
        orders = self.repository.dashboard_order_details()
        amounts = self.repository.dashboard_amount_details()
        revenue = self.repository.dashboard_total_revenue_details()
        return CompleteAdminDashboard(
            dashboard_user=users,
            dashboard_product=products,
            dashboard_order=orders,
            dashboard_amount=amounts,
            dashboard_revenue=revenue,
        )

    def filtered_sales_report(self, time_period: str) -> SalesReport:
        if time_period == "":
            raise UseCaseError(ERR_FIELD_EMPTY)
        if time_period not in ("day", "month", "year"):
            raise UseCaseError(ERR_INVALID_TIME_PERIOD)
        start, end = self.helper.get_time_from_period(time_period)
        return self.repository.filtered_sales_report(start, end)

    def execute_sales_report_by_date(self, start_date: str, end_date: str) -> SalesReport:
        try:
            start = _parse_date(start_date)
        except ValueError:
            raise UseCaseError("enter the date in correct format") from None
        if start == _ZERO_TIME:
            raise UseCaseError("enter date in correct format & valid date")
        try:
            end = _parse_date(end_date)
        except ValueError:
            raise UseCaseError("enter the date in correct format") from None
        if end == _ZERO_TIME:
            raise UseCaseError("enter the date in correct format & vallid date")
        if start > end:
            raise UseCaseError("start date is after end date")
        try:
            return self.repository.filtered_sales_report(start, end)
        except Exception as exc:
            raise UseCaseError("report fetching failed") from exc

    def sales_by_date(self, day: int, month: int, year: int) -> list[OrderDetailsAdmin]:
        if day == 0 and month == 0 and year == 0:
            raise UseCaseError("must enter a value for day, month, and year")
        if day < 0 or month < 0 or year < 0:
            raise UseCaseError("no such values are allowded")
        if year >= 2020:
            if month == 0 and day == 0:
                return self.repository.sales_by_year(year)
            if 0 < month <= 12 and day == 0:
                return self.repository.sales_by_month(year, month)
            if 0 < month <= 12 and 0 < day <= 31:
                return self.repository.sales_by_day(year, month, day)
        raise UseCaseError("invalid date parameters")

    def print_sales_report(self, sales: list[OrderDetailsAdmin]) -> PdfDocument:
        pdf = PdfDocument()
        pdf.add_page()
        pdf.set_font("Arial", "B", 22)
        pdf.set_text_color(31, 73, 125)
        pdf.cell(0, 20, "Total Sales Report", "0", 1, "C", False)

        pdf.set_font("Arial", "", 16)
        pdf.set_text_color(0, 0, 0)
        for item in sales:
            pdf.cell(0, 10, "Product:" + item.product_name, "0", 1, "L", False)
            pdf.cell(0, 10, f"Amount Sold:${item.total_amount:.2f}", "0", 1, "L", False)
            pdf.ln(5)
        final_amount = sum(item.total_amount for item in sales)

        pdf.set_font("Arial", "", 18)
        pdf.set_text_color(0, 0, 0)
        pdf.cell(0, 10, f" Total Amount Sold: {final_amount:.2f}", "0", 1, "L", False)

        pdf.set_font("Arial", "I", 12)
        pdf.set_text_color(150, 150, 150)
        stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        pdf.cell(0, 10, "Generated by Show Times India Pvt Ltd.-" + stamp)
        return pdf