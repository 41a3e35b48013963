"""
Navigation definitions for the demo project.

``build_primary`` declares the main menu with the builder API;
``build_footer`` declares a flat menu as data. Both are referenced from
``settings.SIMPLE_NAVIGATION["NAVIGATIONS"]``.
"""

from django.urls import reverse_lazy

from simple_navigation.adapters import NavItem


def _is_staff(request):
    user = getattr(request, "user", None)
    return bool(user is not None and getattr(user, "is_staff", False))


def build_primary(primary, request):
    primary.item("home", "Home", reverse_lazy("home"))

    def projects(sub):
        sub.item("active", "Active", reverse_lazy("page", args=["projects/active"]))
        sub.item("archived", "Archived", reverse_lazy("page", args=["projects/archived"]))

    primary.item(
        "projects",
        "Projects",
        reverse_lazy("page", args=["projects"]),
        {"highlights_on": "subpath"},
        sub_menu=projects,
    )

    def organization(sub):
        sub.item("departments", "Departments", reverse_lazy("page", args=["organization/departments"]))
        sub.item("locations", "Locations", reverse_lazy("page", args=["organization/locations"]))

    primary.item("organization", "Organization", {"highlights_on": "/organization/"}, sub_menu=organization)
    primary.item("admin", "Admin", "/admin/", {"if": lambda: _is_staff(request)})


FOOTER = (
    NavItem(key="about", name="About", url="/about/"),
    NavItem(key="contact", name="Contact", url="/contact/"),
)


def build_footer(footer, request):
    footer.set_items(FOOTER)
