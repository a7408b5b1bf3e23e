"""``perch resolve`` — report where a view name resolves.

Prints the winning path, or every location searched when nothing
matched. Exits with status 1 on a miss so scripts can check views
exist before deploying.
"""

import argparse
import sys

from perch.config import ViewEngineConfig
from perch.context import AREA_KEY, CONTROLLER_KEY, ActionContext
from perch.errors import ConfigurationError, ViewNameError
from perch.views.engine import ViewEngine


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.name`` against the templates directory and print the outcome."""
    try:
        config = ViewEngineConfig(template_dir=args.templates, view_extension=args.extension)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    engine = ViewEngine.from_config(config)
    route_values = {}
    if args.controller:
        route_values[CONTROLLER_KEY] = args.controller
    if args.area:
        route_values[AREA_KEY] = args.area
    context = ActionContext(route_values)

    try:
        if args.partial:
            result = engine.find_partial_view(context, args.name)
        else:
            result = engine.find_view(context, args.name)
    except ViewNameError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    if result:
        print(f"found: {result.view_name}")
        return

    print(f"not found: {result.view_name}")
    for location in result.searched_locations:
        print(f"  {location}")
    sys.exit(1)
