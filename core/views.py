from django.shortcuts import render

from simple_navigation.helpers import select_navigation


def home(request):
    return render(request, "page.html", {"title": "Home"})


def page(request, slug):
    """Generic demo page; ``?select=key1,key2`` selects navigation explicitly."""
    keys = [key for key in request.GET.get("select", "").split(",") if key]
    if keys:
        select_navigation(request, *keys)
    return render(request, "page.html", {"title": slug})
