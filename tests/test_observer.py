import pytest

from patternkit.observer import (
    Classroom,
    Publisher,
    Student,
    Subscriber,
    Teacher,
    main,
)


class Deaf(Subscriber):
    def __init__(self, name):
        super().__init__(name)
        self.received = []

    def update(self, info):
        self.received.append(info)

    def wants_info(self):
        return False


def test_subscribe_links_both_sides():
    teacher = Teacher("T")
    student = Student("S")
    student.subscribe(teacher)
    assert teacher.observers == (student,)
    assert student.subscriptions == (teacher,)


def test_subscribe_twice_is_ignored():
    teacher = Teacher("T")
    student = Student("S")
    student.subscribe(teacher)
    student.subscribe(teacher)
    teacher.add_observer(student)
    assert teacher.observers == (student,)
    assert student.subscriptions == (teacher,)


def test_unsubscribe_unlinks_both_sides():
    teacher = Teacher("T")
    student = Student("S")
    teacher.add_observer(student)
    student.unsubscribe(teacher)
    assert teacher.observers == ()
    assert student.subscriptions == ()


def test_teacher_remove_observer_unlinks_both_sides():
    teacher = Teacher("T")
    first, second = Student("A"), Student("B")
    teacher.add_observer(first)
    teacher.add_observer(second)
    teacher.remove_observer(first)
    assert teacher.observers == (second,)
    assert first.subscriptions == ()
    assert second.subscriptions == (teacher,)


def test_plain_publisher_add_is_one_sided():
    publisher = Publisher("P")
    student = Student("S")
    publisher.add_observer(student)
    assert publisher.observers == (student,)
    assert student.subscriptions == ()


def test_teacher_notify_output(capsys):
    teacher = Teacher("T")
    student = Student("S")
    teacher.add_observer(student)
    reached = teacher.notify("hi")
    assert reached == [student]
    assert capsys.readouterr().out == (
        "Teacher T Send HomeWork\n\tT Notice Studen S Get Info : hi\n\n"
    )


def test_notify_skips_unwilling_observers(capsys):
    teacher = Teacher("T")
    deaf = Deaf("D")
    student = Student("S")
    teacher.add_observer(deaf)
    teacher.add_observer(student)
    reached = teacher.notify("news")
    assert reached == [student]
    assert deaf.received == []
    assert capsys.readouterr().out.count("T Notice") == 2


def test_show_info_lists_links(capsys):
    teacher = Teacher("T")
    student = Student("S")
    teacher.add_observer(student)
    teacher.show_info()
    student.show_info()
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Publisher T",
        "\tRegister Observer S",
        "Observer S",
        "\tSubscriebe Publisher T",
    ]


def test_classroom_creates_named_people():
    room = Classroom(seed=1)
    room.create_students(3)
    room.create_teachers(2)
    assert [s.name for s in room.students] == ["Student_0", "Student_1", "Student_2"]
    assert [t.name for t in room.teachers] == ["Teacher_0", "Teacher_1"]


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 42])
def test_simulate_keeps_links_consistent(seed, capsys):
    room = Classroom(seed=seed)
    room.simulate(5, 2)
    capsys.readouterr()
    assert len(room.students) == 5
    assert len(room.teachers) == 2
    for student in room.students:
        assert len(student.subscriptions) >= 1
        for teacher in room.teachers:
            assert (teacher in student.subscriptions) == (student in teacher.observers)


def test_simulate_is_deterministic_with_seed(capsys):
    first = Classroom(seed=7)
    first.simulate(5, 2)
    out_first = capsys.readouterr().out
    second = Classroom(seed=7)
    second.simulate(5, 2)
    out_second = capsys.readouterr().out
    assert out_first == out_second
    assert "Math Homework status update, please Notice That" in out_first


def test_simulate_without_students_fails():
    room = Classroom(seed=0)
    with pytest.raises(ValueError):
        room.simulate(0, 2)


def test_main_runs(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "Teacher Teacher_0 Send HomeWork" in out
    assert "Teacher Teacher_1 Send HomeWork" in out