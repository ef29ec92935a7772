from modules.core.exceptions import AlreadyExists, NotFound


class RouteNotFound(NotFound):
    entity = "route"


class RouteAlreadyExists(AlreadyExists):
    """Another route uses the same code."""
