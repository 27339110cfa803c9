# patternkit

A collection of small, self-contained building blocks, each showing a
classic design pattern or a type-level utility in plain Python. There are
no runtime dependencies.

## Modules

| Module | What it offers |
| --- | --- |
| `patternkit.checkpoints` | Route checkpoints (`CheckPoint`, `OptionalCheckPoint`, `CheckPointType`) and builders (`TextListBuilder`, `PenaltyCalculatorBuilder`) behind the `CheckPointListBuilder` interface, with a `CheckPointListDirector` that holds a builder |
| `patternkit.typelist` | `TypeList`, an immutable ordered list of types with `index_of`, `append`, `prepend` and `type_at`, plus `size(*args)` |
| `patternkit.typemap` | `TypeMap`, a container that stores at most one value per declared type |
| `patternkit.comparable` | `LessThanComparable`, a mixin deriving `>`, `<=`, `>=`, `==` and `!=` from `<`; `Counted`, a mixin counting live instances per class; and `Number`, which uses both |
| `patternkit.log` | `Log`, a process-wide singleton that keeps the ten most recent timestamped messages, graded by `LogLevel` |
| `patternkit.users` | `UserManager` for users and groups, and `CommandShell`, a line-oriented command interpreter over it |
| `patternkit.sets` | `AdaptiveSet`, which switches between an `ArraySet` and a `HashSet` as it grows and shrinks |
| `patternkit.expressions` | Arithmetic expression trees (`Constant`, `Variable`, `Addition`, `Subtraction`, `Multiplication`, `Division`) and a flyweight `ExpressionFactory` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Checkpoints and builders:

```python
from patternkit.checkpoints import CheckPoint, OptionalCheckPoint, PenaltyCalculatorBuilder

points = [CheckPoint("A", 55.75, 37.62), OptionalCheckPoint("B", 59.93, 30.30, 1.5)]
builder = PenaltyCalculatorBuilder()
for point in points:
    builder.add_check_point(point)
builder.total_penalty             # 1.5
```

Type lists:

```python
from patternkit.typelist import TypeList

types = TypeList(int, float, str)
len(types)                        # 3
int in types                      # True
types.index_of(float)             # 1
types.index_of(bytes)             # -1
types.append(bool).type_at(3)     # bool
types.prepend(bool).type_at(0)    # bool
```

A map keyed by type:

```python
from patternkit.typemap import TypeMap

values = TypeMap(int, float)
values.add_value(int, 42)
values.get_value(int)             # 42
values.contains(float)            # False
values.get_value(float)           # raises KeyError
values.add_value(str, "x")        # raises ValueError: str is not a declared type
```

The shared log:

```python
from patternkit.log import Log, LogLevel

log = Log.instance()
log.message(LogLevel.WARNING, "Low memory")
log.lines()                       # ['WARNING: dd/mm/yyyy hh:mm:ss: Low memory']
```

Only the last ten messages are kept; `clear()` empties the log.

An adaptive set:

```python
from patternkit.sets import AdaptiveSet, ArraySet

numbers = AdaptiveSet(ArraySet(5), threshold=5)
for n in range(6):
    numbers.add(n)                # prints a notice on switching to HashSet
len(numbers)                      # 6
```

Expressions built through the shared factory:

```python
from patternkit.expressions import Addition, ExpressionFactory

factory = ExpressionFactory.instance()
expr = Addition(factory.create_constant(2), factory.create_variable("x"))
print(expr)                       # (2 + x)
expr.calculate({"x": 3})          # 5.0
```

Constants from -5 to 256 are created once and shared: asking the factory
for the same small constant twice returns the same object. Evaluating a
variable missing from the context raises `KeyError`, and dividing by zero
raises `ZeroDivisionError`.

## Command-line tools

Each demonstration can be run from the shell once the package is installed.

```
patternkit-users
```

Starts an interactive shell on standard input. It understands
`createUser {userId} {username} {additional info}`, `deleteUser {userId}`,
`allUsers`, `getUser {userId}`, `createGroup {groupId}`,
`deleteGroup {groupId}`, `allGroups`, `getGroup {groupId}`,
`addUserToGroup {userId} {groupId}`, `removeUserFromGroup {userId} {groupId}`,
and `exit` or `quit`. Usage messages and errors are written to standard
error and the shell carries on.

```
patternkit-typemap
patternkit-compare
patternkit-sets
patternkit-expressions
```

Each runs a short demonstration of its module and prints the results.

## Limitations

- The user shell keeps users and groups in memory only; nothing is saved
  when it exits.
- `Log` holds its entries in memory and writes them only when `print` is
  called; it does not write to a file.