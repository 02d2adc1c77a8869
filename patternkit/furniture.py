"""Furniture of three styles and the factories that make it."""

from __future__ import annotations

from functools import lru_cache

STYLES = ("A", "B", "C")


class Furniture:
    """A named piece of furniture."""

    def __init__(self, name: str) -> None:
        self.name = name

    def func(self) -> None:
        print("this is a Furniture")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class _StyledFurniture(Furniture):
    kind = ""
    verb = "fun"

    def __init__(self, name: str, style: str) -> None:
        if style not in STYLES:
            raise ValueError(f"unknown furniture style: {style!r}")
        self.style = style
        super().__init__(f"{name}_{style}_{self.kind}")

    def _run(self, number: int) -> None:
        print(f"{self.name} {self.kind} {self.style} run {self.verb}{number}")


class Chair(_StyledFurniture):
    """A chair of one of the styles A, B or C."""

    kind = "Chair"
    verb = "Fun"

    def fun1(self) -> None:
        self._run(1)

    def fun2(self) -> None:
        self._run(2)


class Table(_StyledFurniture):
    """A table of one of the styles A, B or C."""

    kind = "Table"

    def fun1(self) -> None:
        self._run(1)

    def fun2(self) -> None:
        self._run(2)


class Sofa(_StyledFurniture):
    """A sofa of one of the styles A, B or C."""

    kind = "Sofa"

    def fun1(self) -> None:
        self._run(1)

    def fun2(self) -> None:
        self._run(2)


class UnknownFactoryError(LookupError):
    """No factory is registered under the requested key."""

    def __init__(self, key: str, kind: str) -> None:
        super().__init__(f"{key} {kind} can't create")
        self.key = key
        self.kind = kind


class FurnitureFactory:
    """Makes chairs, tables and sofas of a single style."""

    def __init__(self, style: str) -> None:
        if style not in STYLES:
            raise ValueError(f"unknown furniture style: {style!r}")
        self.style = style

    def create_table(self, name: str) -> Table:
        return Table(name, self.style)

    def create_chair(self, name: str) -> Chair:
        return Chair(name, self.style)

    def create_sofa(self, name: str) -> Sofa:
        return Sofa(name, self.style)


class FurnitureRegistry:
    """Looks up furniture factories by key."""

    def __init__(self) -> None:
        self._factories: dict[str, FurnitureFactory] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._factories

    def add_factory(self, key: str, factory: FurnitureFactory) -> None:
        """Register ``factory``; a key already registered keeps its factory."""
        self._factories.setdefault(key, factory)

    def _factory(self, key: str, kind: str) -> FurnitureFactory:
        try:
            return self._factories[key]
        except KeyError:
            raise UnknownFactoryError(key, kind) from None

    def create_table(self, key: str, name: str) -> Table:
        return self._factory(key, "Table").create_table(name)

    def create_chair(self, key: str, name: str) -> Chair:
        return self._factory(key, "Chair").create_chair(name)

    def create_sofa(self, key: str, name: str) -> Sofa:
        return self._factory(key, "Sofa").create_sofa(name)


@lru_cache(maxsize=None)
def default_registry() -> FurnitureRegistry:
    """The shared registry holding a factory for each style."""
    registry = FurnitureRegistry()
    for style in STYLES:
        registry.add_factory(style, FurnitureFactory(style))
    return registry