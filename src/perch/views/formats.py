"""View location formats and path classification.

A location format is a template string with positional placeholders::

    {0} = view name
    {1} = controller name
    {2} = area name

Formats are filled with ``str.format`` on plain strings, which never
applies locale-sensitive casing or number formatting.
"""

VIEW_EXTENSION = ".cshtml"


def view_location_formats(extension: str = VIEW_EXTENSION) -> tuple[str, ...]:
    """Built-in formats searched when the request has no area."""
    return (
        "/Views/{1}/{0}" + extension,
        "/Views/Shared/{0}" + extension,
    )


def area_view_location_formats(extension: str = VIEW_EXTENSION) -> tuple[str, ...]:
    """Built-in formats searched inside an area, shared fallback last."""
    return (
        "/Areas/{2}/Views/{1}/{0}" + extension,
        "/Areas/{2}/Views/Shared/{0}" + extension,
        "/Views/Shared/{0}" + extension,
    )


VIEW_LOCATION_FORMATS = view_location_formats()
AREA_VIEW_LOCATION_FORMATS = area_view_location_formats()


def format_location(fmt: str, view_name: str, controller_name: str, area_name: str) -> str:
    """Substitute view, controller, and area into a location format."""
    return fmt.format(view_name, controller_name, area_name)


def is_specific_path(name: str) -> bool:
    """True if *name* is an application path rather than a logical view name.

    Only the first character is inspected: ``~`` or ``/``.
    """
    return name[0] in "~/"


def template_name_for(path: str) -> str:
    """Map an application path to a loader-relative template name.

    ``"/Views/Home/Index.cshtml"`` and ``"~/Views/Home/Index.cshtml"``
    both become ``"Views/Home/Index.cshtml"``.
    """
    if path.startswith("~"):
        path = path[1:]
    return path.lstrip("/")
