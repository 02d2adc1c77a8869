"""Teachers that publish homework notices and students that subscribe to them."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod


class Observer(ABC):
    """Something that can be told about new information."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @abstractmethod
    def update(self, info: str) -> None:
        """Receive ``info``."""

    @abstractmethod
    def wants_info(self) -> bool:
        """Whether this observer currently accepts updates."""


class Publisher:
    """Keeps a list of observers and passes notices on to them."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._observers: list[Observer] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def _register(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def _unregister(self, observer: Observer) -> None:
        self._observers = [obs for obs in self._observers if obs is not observer]

    def add_observer(self, observer: Observer) -> None:
        """Register ``observer`` once; a repeat is ignored."""
        self._register(observer)

    def remove_observer(self, observer: Observer) -> None:
        self._unregister(observer)

    def notify(self, info: str) -> list[Observer]:
        """Pass ``info`` to every willing observer; return those that got it."""
        reached = []
        for observer in self._observers:
            print(f"\t{self.name} Notice ", end="")
            if observer.wants_info():
                observer.update(info)
                reached.append(observer)
        print()
        return reached

    def show_info(self) -> None:
        print(f"Publisher {self.name}")
        for observer in self._observers:
            print(f"\tRegister Observer {observer.name}")


class Subscriber(Observer):
    """An observer that remembers the publishers it follows."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._subscriptions: list[Publisher] = []

    @property
    def subscriptions(self) -> tuple[Publisher, ...]:
        return tuple(self._subscriptions)

    def subscribe(self, publisher: Publisher) -> None:
        """Follow ``publisher``; following it twice changes nothing."""
        if publisher in self._subscriptions:
            return
        publisher._register(self)
        self._subscriptions.append(publisher)

    def unsubscribe(self, publisher: Publisher) -> None:
        self._subscriptions = [p for p in self._subscriptions if p is not publisher]
        publisher._unregister(self)

    def show_info(self) -> None:
        print(f"Observer {self.name}")
        for publisher in self._subscriptions:
            print(f"\tSubscriebe Publisher {publisher.name}")


class Student(Subscriber):
    """A subscriber that always takes homework notices."""

    def update(self, info: str) -> None:
        print(f"Studen {self.name} Get Info : {info}")

    def wants_info(self) -> bool:
        return True


class Teacher(Publisher):
    """A publisher whose registrations are kept in step on both sides."""

    def add_observer(self, observer: Subscriber) -> None:
        observer.subscribe(self)
        self._register(observer)

    def remove_observer(self, observer: Subscriber) -> None:
        observer.unsubscribe(self)
        self._unregister(observer)

    def notify(self, info: str) -> list[Observer]:
        print(f"Teacher {self.name} Send HomeWork")
        return super().notify(info)


class Classroom:
    """Students and teachers wired together at random."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)
        self.students: list[Student] = []
        self.teachers: list[Teacher] = []

    def create_students(self, count: int) -> list[Student]:
        created = [Student(f"Student_{i}") for i in range(count)]
        self.students.extend(created)
        return created

    def create_teachers(self, count: int) -> list[Teacher]:
        created = [Teacher(f"Teacher_{i}") for i in range(count)]
        self.teachers.extend(created)
        return created

    def show_current_info(self) -> None:
        for student in self.students:
            student.show_info()
        print()
        for teacher in self.teachers:
            teacher.show_info()
        print()

    def notify_all(self, info: str) -> None:
        for teacher in self.teachers:
            teacher.notify(info)

    def _pick(self, people: list):
        return people[self._random.randrange(len(people))]

    def simulate(self, student_count: int, teacher_count: int) -> None:
        """Subscribe everyone, shuffle some links at random, then send a notice."""
        self.create_students(student_count)
        self.create_teachers(teacher_count)

        for student in self.students:
            for teacher in self.teachers:
                teacher.add_observer(student)

        for student in self.students:
            student.unsubscribe(self._pick(self.teachers))

        for teacher in self.teachers:
            teacher.remove_observer(self._pick(self.students))

        for student in self.students:
            student.subscribe(self._pick(self.teachers))

        self.show_current_info()
        self.notify_all("Math Homework status update, please Notice That")


def main(argv=None) -> int:
    Classroom().simulate(5, 2)
    return 0