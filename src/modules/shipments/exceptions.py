from modules.core.exceptions import AlreadyExists, NotFound


class ShipmentStatusNotFound(NotFound):
    """No stored status matches the requested id or name."""

    entity = "shipment_status"


class ShipmentStatusAlreadyExists(AlreadyExists):
    """A status with the same name is already stored."""
