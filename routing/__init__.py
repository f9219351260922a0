#Marks routing as a package.
#Re-exports the Route Index so other modules import from routing
#without knowing internal file names.
#No business logic.

from .route_line import (
    MOZ_ROUTES,
    NOT_FOUND,
    Direction,
    RouteLine,
    default_route_line,
)

__all__ = [
           "MOZ_ROUTES",
           "NOT_FOUND",
             "Direction",
             "RouteLine",
             "default_route_line",
             ]
