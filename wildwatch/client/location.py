from __future__ import annotations

import logging
from typing import Optional, Tuple

from wildwatch import config
from wildwatch.errors import PermissionDenied

Coordinates = Tuple[float, float]

LOCATION_DENIED_MESSAGE = "Permission to access location was denied"


class LocationProvider:
    """Device position source. Asked once, on start-up."""

    def request_permission(self) -> bool:
        raise NotImplementedError

    def current_position(self) -> Coordinates:
        raise NotImplementedError


class StaticLocationProvider(LocationProvider):
    """A fixed position; `None` behaves like a refused permission."""

    def __init__(self, coords: Optional[Coordinates]) -> None:
        self._coords = coords

    def request_permission(self) -> bool:
        return self._coords is not None

    def current_position(self) -> Coordinates:
        if self._coords is None:
            raise PermissionDenied(LOCATION_DENIED_MESSAGE)
        return self._coords


class EnvLocationProvider(StaticLocationProvider):
    """Position from WILDWATCH_LATITUDE / WILDWATCH_LONGITUDE."""

    def __init__(self) -> None:
        super().__init__(config.device_coordinates())


def locate(provider: LocationProvider) -> Coordinates:
    """
    Check permission, then read the position once.

    Raises:
        PermissionDenied: if the provider refuses access.
    """
    if not provider.request_permission():
        logging.warning("[LOCATION] permission denied")
        raise PermissionDenied(LOCATION_DENIED_MESSAGE)
    coords = provider.current_position()
    logging.info("[LOCATION] device at %.5f, %.5f", coords[0], coords[1])
    return coords
