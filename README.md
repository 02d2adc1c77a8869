# patternkit

Compact, working examples of classic object-oriented design patterns. Each
module is a self-contained scenario you can read, import and run. The package
has no dependencies outside the standard library.

| Module | Pattern | Scenario |
| --- | --- | --- |
| `patternkit.adapter` | Adapter | An `Adapter` wraps a `ChineseSocket` and an `AmericanSocket` so that a plug of either standard can use the socket of the other; each wrapped socket is always fed its own rated voltage. |
| `patternkit.furniture` | Abstract factory | A `FurnitureFactory` makes `Chair`, `Table` and `Sofa` objects of one style (`A`, `B` or `C`); a `FurnitureRegistry` picks a factory by key. |
| `patternkit.transport` | Template method | `LandTransport`, `LiquidTransport` and `AirTransport` share the loading and delivery logic of `BaseTransport`. |
| `patternkit.iteration` | Iterator | A fixed-capacity `Docker` and a doubly linked `LinkedList`, each with forward and reverse cursors. |
| `patternkit.observer` | Observer | `Teacher` publishers notify subscribed `Student` observers inside a `Classroom`. |
| `patternkit.proxy` | Proxy | `NumberProxy` guards a `LuckyNumber` store with access rules and a least-recently-used cache. |
| `patternkit.mario` | State and command | A `Mario` changes form as it touches tools; commands move it across a `Board`. |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line demos

Each demo prints its walk-through to standard output:

```
patternkit-adapter
patternkit-iterator
patternkit-observer
patternkit-proxy
```

`patternkit-observer` wires students and teachers together at random, so its
output differs from run to run.

## Using the modules

### Adapter

```python
from patternkit.adapter import Adapter, AmericanSocket, ChineseSocket, use_american_plug

adapter = Adapter(chinese=ChineseSocket(), american=AmericanSocket())
print(adapter.american_socket_input())   # Input Chinese Standard Socket.
use_american_plug(adapter)               # returns True: both sockets work normally
```

An `Adapter` missing the socket a plug needs answers with
`"Error : No Sockeet Input"`. `use_chinese_plug` and `use_american_plug`
return whether the socket worked at its rated voltage.

### Furniture and transport

```python
from patternkit.furniture import UnknownFactoryError, default_registry
from patternkit.transport import LandTransport

registry = default_registry()
truck = LandTransport()
truck.add_furniture(registry.create_chair("A", "1"))   # named "1_A_Chair"
truck.add_furniture(registry.create_sofa("B", "2"))    # named "2_B_Sofa"
truck.show_transport_info()
truck.show_furniture_info()
delivered = truck.do_transport()   # the load; the truck is now empty

try:
    registry.create_table("Z", "3")
except UnknownFactoryError as error:
    print(error)   # Z Table can't create
```

Registering a factory under a key that is already taken keeps the first one.
`remove_furniture_by_name` returns the removed piece and raises `LookupError`
when no piece has that name. An unknown style passed to `FurnitureFactory`
raises `ValueError`.

### Iteration

```python
from patternkit.iteration import Docker, LinkedList, find

docker = Docker(10)
for value in (1, 2, 3):
    docker.add_item(value)

cursor = docker.cursor(reverse=True)
while not cursor.is_done():
    print(cursor.value)   # 3, 2, 1
    cursor.advance()

numbers = LinkedList([1, 2, 3, 4])
print(find(numbers, 3))
print(numbers.pop_back())   # 4
```

`Docker.add_item` raises `OverflowError` once `max_size` items are held;
indexing outside the stored items raises `IndexError`. `LinkedList.pop_back`
on an empty list raises `IndexError`, and `find` raises `ValueError` when the
value is absent.

### Observer

```python
from patternkit.observer import Classroom, Student, Teacher

teacher = Teacher("Teacher_0")
student = Student("Student_0")
teacher.add_observer(student)          # both sides now know each other
reached = teacher.notify("Homework")   # the observers that got the notice

room = Classroom(seed=1)               # a seed makes simulate() repeatable
room.simulate(5, 2)
```

### Proxy

```python
from patternkit.proxy import NumberProxy, User

admin = NumberProxy(User.ADMIN, "")
print(admin.generate("Rat"))   # 1469, now cached
admin.update("Rat", 1920)
admin.show_cache()

consumer = NumberProxy(User.CONSUMER, "normal")
consumer.add("normal", 3521)   # allowed: the consumer's own entry
consumer.generate("Rat")       # raises PermissionError
```

`generate` returns `None` for an unknown key. The backing store is created on
first use and the cache holds at most ten entries.

### State and command

```python
from patternkit.mario import Board

board = Board()
board.handle_input("d")        # step right; returns False on "q" or once Mario dies
board.mario.got_mushroom()     # SmallMario -> SuperMario, drawn as "O"
print(board.mario.coins)       # 100
print(board.render())          # the tip line followed by the board rows
```

Mushroom, fire flower, feather and attack tools lie on the ground at x = 20,
40, 60 and 80; walking onto one triggers it. An attack on small Mario ends the
game by setting `board.config.mario_alive` to `False`.

## What the package does not do

- `patternkit.mario` has no playable game: there is no keyboard loop, no
  screen refresh and no jumping. `Board.handle_input` takes one key at a time
  ("a" and "d" move, "q" quits) and `Board.render` returns the screen as a
  string for the caller to print.
- The furniture and transport modules offer no interactive menu for choosing
  transports and furniture; they are used from Python code only.