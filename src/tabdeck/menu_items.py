# tabdeck/menu_items.py
# Navigation drawer contents: groups of (title, url) entries.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class MenuItem:
    id: str
    title: str
    url: str


@dataclass(frozen=True)
class MenuGroup:
    id: str
    title: str
    children: List[MenuItem] = field(default_factory=list)


MENU_GROUPS: List[MenuGroup] = [
    MenuGroup("dashboard", "Dashboard", [
        MenuItem("default", "Dashboard", "/dashboard/default"),
        MenuItem("daily-transactions", "Daily Transactions", "/daily/transactions"),
    ]),
    MenuGroup("admin", "Admin", [
        MenuItem("all-users", "All Users", "/admin/allusers"),
        MenuItem("all-logs", "All Logs", "/admin/alllogs"),
        MenuItem("admin-invoice", "Estimates", "/admin/invoice"),
    ]),
    MenuGroup("products", "Products", [
        MenuItem("all-products", "All Products", "/products/all"),
        MenuItem("low-stock", "Low Stock Products", "/products/upcomming/lowstock"),
    ]),
    MenuGroup("invoice", "Invoice", [
        MenuItem("invoice-create", "Create Invoice", "/invoice/create"),
        MenuItem("invoice-list", "Invoice List", "/invoice/list"),
        MenuItem("invoice-payment", "Invoice Payment", "/invoice/payment"),
    ]),
    MenuGroup("purchase", "Purchase", [
        MenuItem("purchase-create", "Create Purchase", "/purchase/create"),
        MenuItem("purchase-list", "Purchase List", "/purchase/list"),
        MenuItem("purchase-requests", "Purchase Requests", "/purchase/list-purchase-request"),
    ]),
    MenuGroup("apps", "Apps", [
        MenuItem("announcements", "Announcements", "/announcements/all"),
        MenuItem("task-board", "Task Board", "/tasks/board"),
        MenuItem("calendar", "Calendar", "/calendar"),
        MenuItem("chat", "Chat", "/chat"),
        MenuItem("notifications", "Notifications", "/notifications/all"),
    ]),
    MenuGroup("driver", "Driver", [
        MenuItem("delivery", "Deliveries", "/driver/delivery"),
    ]),
    MenuGroup("payments", "Payments", [
        MenuItem("supplier-payment", "Supplier Payment", "/supplier/payment"),
        MenuItem("transport-payment", "Transport Payment", "/transport/payment"),
    ]),
    MenuGroup("stocks", "Stocks", [
        MenuItem("stock-update", "Stock Update", "/stock/update"),
        MenuItem("stock-registry", "Stock Registry", "/stock/registry"),
    ]),
    MenuGroup("reports", "Reports", [
        MenuItem("invoice-report", "Invoice Report", "/invoice/report"),
        MenuItem("purchase-report", "Purchase Report", "/purchase/report"),
        MenuItem("daily-report", "Daily Report", "/daily/report"),
    ]),
    MenuGroup("accounts", "Accounts", [
        MenuItem("accounts-list", "Accounts", "/accounts/list"),
        MenuItem("accounts-create", "Create Account", "/accounts/create"),
    ]),
    MenuGroup("contacts", "Contacts", [
        MenuItem("customers", "Customers", "/customer/account"),
        MenuItem("suppliers", "Suppliers", "/supplier/account"),
        MenuItem("transports", "Transports", "/transport/account"),
    ]),
]


def find_item(url: str) -> MenuItem | None:
    for group in MENU_GROUPS:
        for item in group.children:
            if item.url == url:
                return item
    return None
