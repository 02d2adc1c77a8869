"""A lucky-number store and a caching, access-checking proxy in front of it."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections import OrderedDict
from collections.abc import Callable, Mapping

DEFAULT_NUMBERS: dict[str, int] = {
    "Rat": 1469,
    "Ox": 2057,
    "Tiger": 1368,
    "Rabbit": 1368,
    "Dragon": 2507,
    "Snake": 2378,
    "Horse": 2378,
    "Goat": 2570,
    "Monkey": 4950,
    "Rooster": 4095,
    "Dog": 2057,
    "Pig": 1469,
}

CACHE_MAX = 10


class NumberStore(ABC):
    """The operations every number store offers."""

    @abstractmethod
    def generate(self, animal: str) -> int | None:
        """The number stored for ``animal``, or None if there is none."""

    @abstractmethod
    def update(self, key: str, value: int) -> None:
        """Set the number for ``key``."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Forget the number for ``key``."""

    @abstractmethod
    def add(self, key: str, value: int) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def show_info(self) -> None:
        """Print what is stored."""


class LuckyNumber(NumberStore):
    """The backing store, filled with a number for each zodiac animal."""

    def __init__(self, numbers: Mapping[str, int] | None = None) -> None:
        self._numbers: dict[str, int] = dict(DEFAULT_NUMBERS if numbers is None else numbers)

    def __contains__(self, key: object) -> bool:
        return key in self._numbers

    def __len__(self) -> int:
        return len(self._numbers)

    def generate(self, animal: str) -> int | None:
        return self._numbers.get(animal)

    def update(self, key: str, value: int) -> None:
        """Set ``key`` to ``value``, adding it when it is missing."""
        self._numbers[key] = value

    def remove(self, key: str) -> None:
        self._numbers.pop(key, None)

    def add(self, key: str, value: int) -> None:
        """Store ``value``; an existing key is updated."""
        self._numbers[key] = value

    def show_info(self) -> None:
        print("LuckNumber Info : ")
        for key in sorted(self._numbers):
            print(f"\t{key} {self._numbers[key]}")
        print()


class User(enum.Enum):
    """Who is using a proxy."""

    CONSUMER = "consumer"
    ADMIN = "admin"


class NumberProxy(NumberStore):
    """Checks access, creates the store on first use and caches lookups.

    A consumer may only touch the entry named after themselves; an admin may
    touch any. The cache keeps at most ``CACHE_MAX`` entries and drops the
    least recently used one when full.
    """

    def __init__(
        self,
        user: User,
        name: str,
        store_factory: Callable[[], NumberStore] = LuckyNumber,
    ) -> None:
        self.user = user
        self.name = name
        self._store_factory = store_factory
        self._store: NumberStore | None = None
        self._cache: OrderedDict[str, int] = OrderedDict()

    @property
    def cache(self) -> dict[str, int]:
        """The cached entries, least recently used first."""
        return dict(self._cache)

    @property
    def store(self) -> NumberStore | None:
        """The backing store, or None while it has not been needed yet."""
        return self._store

    def _authorize(self, key: str, action: str) -> None:
        if self.user is User.ADMIN or key == self.name:
            return
        raise PermissionError(f"Normal User Can Only {action} Yourself Data!")

    def _backend(self) -> NumberStore:
        if self._store is None:
            self._store = self._store_factory()
        return self._store

    def _add_cache(self, key: str, value: int) -> None:
        if len(self._cache) >= CACHE_MAX:
            self._cache.popitem(last=False)
        self._cache[key] = value

    def _update_cache(self, key: str, value: int) -> None:
        if key in self._cache:
            self._cache[key] = value

    def generate(self, animal: str) -> int | None:
        self._authorize(animal, "Request")
        store = self._backend()
        if animal in self._cache:
            self._cache.move_to_end(animal)
            return self._cache[animal]
        value = store.generate(animal)
        if value is not None:
            self._add_cache(animal, value)
        return value

    def update(self, key: str, value: int) -> None:
        self._authorize(key, "Update")
        store = self._backend()
        self._update_cache(key, value)
        store.update(key, value)

    def remove(self, key: str) -> None:
        self._authorize(key, "Remove")
        store = self._backend()
        self._cache.pop(key, None)
        store.remove(key)

    def add(self, key: str, value: int) -> None:
        self._authorize(key, "Add")
        store = self._backend()
        self._update_cache(key, value)
        store.add(key, value)

    def show_info(self) -> None:
        if self._store is not None:
            self._store.show_info()

    def show_cache(self) -> None:
        print("Proxy Cache : ")
        for key, value in self._cache.items():
            print(f"\t{key} {value}")
        print()


def _show(proxy: NumberProxy) -> None:
    proxy.show_info()
    proxy.show_cache()


def _report(proxy: NumberProxy, animal: str) -> None:
    try:
        value = proxy.generate(animal)
    except PermissionError as exc:
        print(f"ERROR : {exc}")
        value = None
    print(f"find {value}" if value is not None else "not find 0")


def main(argv=None) -> int:
    admin = NumberProxy(User.ADMIN, "")
    _show(admin)
    _report(admin, "Rat")
    _report(admin, "Horse")
    _show(admin)

    admin.remove("Horse")
    admin.add("Dragon", 3521)
    admin.update("Rat", 1920)
    _show(admin)

    print("-" * 120)

    consumer = NumberProxy(User.CONSUMER, "normal")
    _show(consumer)
    _report(consumer, "Rat")
    _report(consumer, "normal")
    _show(consumer)

    consumer.add("normal", 3521)
    consumer.update("normal", 1920)
    _show(consumer)
    return 0