"""HTTP-related utility helpers."""


def is_ajax(request):
    """Detect HTMX/fetch requests: HX-Request, XMLHttpRequest, a JSON Accept header or ?ajax=1."""
    if request.headers.get("HX-Request"):
        return True
    if request.headers.get("x-requested-with") == "XMLHttpRequest":
        return True
    if "application/json" in request.headers.get("Accept", ""):
        return True
    return request.GET.get("ajax") == "1"
