from .selection import SelectionContext


class SelectionContextMiddleware:
    """
    Attaches ``request.navigation_selection`` so views can refine it with
    ``select_navigation()`` before templates query the navigation.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.navigation_selection = SelectionContext.from_request(request)
        return self.get_response(request)
