"""Ways of transporting a load of furniture."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from patternkit.furniture import Furniture


class BaseTransport(ABC):
    """A vehicle that carries furniture and empties itself on delivery."""

    def __init__(self) -> None:
        self._furniture: list[Furniture] = []

    @property
    @abstractmethod
    def label(self) -> str:
        """Name printed in this transport's messages."""

    def __len__(self) -> int:
        return len(self._furniture)

    def __iter__(self) -> Iterator[Furniture]:
        return iter(self._furniture)

    def add_furniture(self, furniture: Furniture) -> None:
        self._furniture.append(furniture)

    def remove_furniture_by_name(self, name: str) -> Furniture:
        """Take out and return the first piece called ``name``."""
        for index, item in enumerate(self._furniture):
            if item.name == name:
                return self._furniture.pop(index)
        raise LookupError(f"no furniture named {name!r}")

    def show_furniture_info(self) -> None:
        for item in self._furniture:
            print(f"\tfurniture : {item.name}")

    def show_transport_info(self) -> None:
        print(f"{self.label} num {len(self._furniture)}")

    def do_transport(self) -> list[Furniture]:
        """Deliver the load, leaving the transport empty; return what was carried."""
        print(f"{self.label} DoTransport!!!!!!!!!!!!!!!!!!!!!")
        delivered, self._furniture = self._furniture, []
        return delivered


class LandTransport(BaseTransport):
    """Transport over land."""

    label = "TransportLand"


class LiquidTransport(BaseTransport):
    """Transport over water."""

    label = "TransportLiquid"


class AirTransport(BaseTransport):
    """Transport by air."""

    label = "TransportAir"