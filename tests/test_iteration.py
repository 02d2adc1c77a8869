import pytest

from patternkit.iteration import Docker, LinkedList, find, main


def make_docker(values, size=10):
    docker = Docker(size)
    for value in values:
        docker.add_item(value)
    return docker


def test_docker_iterates_in_order():
    docker = make_docker([1, 2, 3])
    assert list(docker) == [1, 2, 3]
    assert list(reversed(docker)) == [3, 2, 1]
    assert len(docker) == 3


def test_docker_full_raises():
    docker = make_docker([1, 2], size=2)
    with pytest.raises(OverflowError):
        docker.add_item(3)
    assert list(docker) == [1, 2]


def test_docker_index_out_of_range():
    docker = make_docker([1, 2, 3])
    with pytest.raises(IndexError):
        docker[3]
    with pytest.raises(IndexError):
        docker[3] = 9
    assert list(docker) == [1, 2, 3]
    assert len(docker) == 3


def test_docker_clear():
    docker = make_docker([1, 2, 3])
    docker.clear()
    assert len(docker) == 0
    docker.add_item(7)
    assert list(docker) == [7]


def test_docker_negative_size_rejected():
    with pytest.raises(ValueError):
        Docker(-1)


def test_docker_reverse_cursor_walk():
    docker = make_docker([1, 2, 3])
    cursor = docker.cursor(reverse=True)
    seen = []
    while not cursor.is_done():
        seen.append(cursor.value)
        cursor.advance()
    assert seen == [3, 2, 1]


def test_docker_forward_cursor_done_at_capacity():
    docker = make_docker([4, 5, 6], size=3)
    cursor = docker.cursor()
    seen = []
    while not cursor.is_done():
        seen.append(cursor.value)
        cursor.advance()
    assert seen == [4, 5, 6]


def test_docker_cursor_set_value_and_equality():
    docker = make_docker([1, 2, 3])
    cursor = docker.cursor()
    cursor.next()
    cursor.set_value(20)
    assert docker[1] == 20
    other = docker.cursor()
    other.advance()
    assert cursor == other
    other.behind()
    assert not cursor == other


def test_list_push_and_iterate():
    numbers = LinkedList()
    for value in (1, 2, 3, 4):
        numbers.push_back(value)
    assert list(numbers) == [1, 2, 3, 4]
    assert list(reversed(numbers)) == [4, 3, 2, 1]
    assert len(numbers) == 4


def test_list_pop_back_order_and_empty():
    numbers = LinkedList([1, 2, 3])
    assert [numbers.pop_back() for _ in range(3)] == [3, 2, 1]
    assert len(numbers) == 0
    with pytest.raises(IndexError):
        numbers.pop_back()


def test_list_push_after_pop():
    numbers = LinkedList([1, 2])
    numbers.pop_back()
    numbers.push_back(5)
    assert list(numbers) == [1, 5]
    assert list(reversed(numbers)) == [5, 1]


def test_list_reverse_cursor_stops_at_head():
    numbers = LinkedList([1, 2, 3])
    cursor = numbers.cursor(reverse=True)
    seen = []
    while not cursor.is_done():
        seen.append(cursor.value)
        cursor.advance()
    assert seen == [3, 2, 1]
    with pytest.raises(IndexError):
        cursor.value


def test_list_cursor_retreat_and_set_value():
    numbers = LinkedList([1, 2, 3])
    cursor = numbers.cursor()
    cursor.advance().advance()
    assert cursor.value == 3
    cursor.retreat()
    cursor.set_value(9)
    assert list(numbers) == [1, 9, 3]


def test_list_forward_cursor_exhausts():
    numbers = LinkedList([1])
    cursor = numbers.cursor()
    cursor.advance()
    assert cursor.is_done()
    with pytest.raises(IndexError):
        cursor.next()


def test_find_in_both_containers():
    assert find(make_docker([1, 2, 3]), 3) == 3
    assert find(LinkedList([1, 2, 3, 4]), 3) == 3
    with pytest.raises(ValueError):
        find(LinkedList([1, 2]), 5)


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    expected = (
        ["1", "2", "3", "3", "2", "1", "find 3", "-" * 26, "find 3"]
        + ["1", "2", "3", "4", "4", "3", "2", "1", "4", "3", "2", "1"]
    )
    assert lines == expected