from django.apps import AppConfig


class SimpleNavigationConfig(AppConfig):
    name = "simple_navigation"
    verbose_name = "Simple navigation"

    def ready(self):
        from simple_navigation.conf import connect_signals

        connect_signals()
