"""
End-to-end tests through the demo project.

Covers:
- SelectionContextMiddleware and the navigation context processor
- navigation_tags template tags rendering the configured navigations
- Explicit selection from a view
- Conditional items driven by the request
"""

from django.template import Context, Template
from django.test import Client, RequestFactory, SimpleTestCase

from core.navigation import build_primary
from simple_navigation.conf import NavigationConfig
from simple_navigation.items import ItemContainer
from simple_navigation.selection import SelectionContext


class PageNavigationTests(SimpleTestCase):

    def setUp(self):
        self.client = Client()

    def test_home_selected(self):
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, '<li id="nav-home" class="selected">')
        self.assertContains(resp, '<h1 id="active">Home</h1>', html=True)

    def test_context_processor_exposes_selection(self):
        resp = self.client.get("/projects/active/")
        self.assertEqual(resp.context["navigation_selection"].path, "/projects/active/")

    def test_sub_navigation_active(self):
        resp = self.client.get("/projects/active/")
        self.assertContains(resp, '<li id="nav-projects" class="selected">')
        self.assertContains(resp, '<li id="nav-active" class="selected">', count=1)
        self.assertContains(resp, '<h1 id="active">Active</h1>', html=True)
        self.assertContains(resp, '<a href="/projects/">Projects</a>')

    def test_subpath_highlight_without_matching_child(self):
        resp = self.client.get("/projects/42/")
        self.assertContains(resp, '<li id="nav-projects" class="selected">')
        # The active leaf is the projects sub-navigation, where nothing is selected
        self.assertContains(resp, '<h1 id="active"></h1>', html=True)
        self.assertNotContains(resp, '<li id="nav-active" class="selected">')

    def test_prefix_highlight_on_item_without_url(self):
        resp = self.client.get("/organization/locations/")
        self.assertContains(resp, '<li id="nav-organization" class="selected">')
        self.assertContains(resp, "<span>Organization</span>")

    def test_explicit_selection_from_view(self):
        resp = self.client.get("/anything/", {"select": "organization,departments"})
        self.assertContains(resp, '<li id="nav-organization" class="selected">')
        self.assertContains(resp, '<h1 id="active">Departments</h1>', html=True)

    def test_no_selection(self):
        resp = self.client.get("/unknown/")
        self.assertNotContains(resp, 'class="selected"')
        self.assertContains(resp, '<h1 id="active"></h1>', html=True)

    def test_admin_item_hidden_for_anonymous(self):
        resp = self.client.get("/")
        self.assertNotContains(resp, 'id="nav-admin"')

    def test_footer_navigation(self):
        resp = self.client.get("/about/")
        self.assertContains(resp, '<li id="nav-about" class="selected">')


class StaffUser:
    is_staff = True


class ConditionalItemTests(SimpleTestCase):

    def test_admin_item_included_for_staff(self):
        request = RequestFactory().get("/")
        request.user = StaffUser()
        primary = ItemContainer(config=NavigationConfig())
        build_primary(primary, request)
        self.assertIsNotNone(primary.lookup("admin"))
        self.assertEqual(primary.level_for("departments"), 2)


class TemplateTagTests(SimpleTestCase):

    def test_without_request_renders_nothing(self):
        template = Template(
            "{% load navigation_tags %}[{% render_navigation %}]"
            "[{% active_navigation_item_name %}][{% active_navigation_item_key %}]"
        )
        self.assertEqual(template.render(Context({})), "[][][]")

    def test_active_item_key(self):
        request = RequestFactory().get("/projects/archived/")
        request.navigation_selection = SelectionContext.from_request(request)
        template = Template("{% load navigation_tags %}{% active_navigation_item_key level=1 %}")
        self.assertEqual(template.render(Context({"request": request})), "projects")
