# starforge

`starforge` is the core of a small game engine for multiplayer side-scrolling
arcade games. It provides:

- **Geometry types** (`starforge.vector`, `starforge.angle`,
  `starforge.color`, `starforge.rect`): `Vector2`, `Vector3`, `Angle`,
  `Color` and `Rect`.
- **An entity-component-system**: `SparseArray` (`starforge.sparse_array`)
  stores components by entity index, `Registry` (`starforge.registry`)
  manages entities, components and systems, and `GameEngine`
  (`starforge.engine`) combines a registry with an `AssetManager`
  (`starforge.assets`) and measures the time between frames.
- **Components** (`starforge.components`): `Transform`, `Velocity`,
  `Drawable`, `Controllable`, `CollisionBox`, `Unmovable`, `ToDelete` and
  `EnemyType` with its `EnemyKind` enum.
- **Input event data** (`starforge.event`): `Event`, `EventType` and the
  payload types `SizeEvent`, `KeyEvent`, `TextEvent`, `MouseMoveEvent`,
  `MouseButtonEvent`, `MouseWheelEvent` and `MouseWheelScrollEvent`.
- **Lobby bookkeeping** for a game server (`starforge.lobby`: `Lobby`,
  `ServerLobbyHandler`) and for its clients (`starforge.client_lobby`:
  `ClientLobbyPlayer`, `ClientLobby`, `ClientLobbyHandler`).

The package has no runtime dependencies.

## Installation

```
pip install .
```

Install the test extra and run the tests with:

```
pip install ".[test]"
pytest
```

## Entities, components and systems

```python
from starforge.engine import GameEngine
from starforge.components import Transform, Velocity


def move(engine, transforms, velocities):
    for index, velocity in velocities:
        if index in transforms:
            transform = transforms[index]
            transform.pos_x += velocity.vel_x * engine.delta_time
            transform.pos_y += velocity.vel_y * engine.delta_time


engine = GameEngine()
engine.register_component(Transform)
engine.register_component(Velocity)

ship = engine.spawn_entity()
engine.add_component(ship, Transform(pos_x=100, pos_y=200))
engine.add_component(ship, Velocity(vel_x=600))

remove_move = engine.add_system(move, Transform, Velocity)
engine.run_systems()          # runs every system, then updates delta_time
remove_move()                 # unregisters the system again
```

A system is any callable. It always receives the registry (here the engine)
first. Every extra argument given to `add_system` or `run_single_system`
that is a class is replaced, each time the system runs, by the
`SparseArray` of that component type; any other argument is passed through
unchanged. Systems run in the order they were added.

Iterating a `SparseArray` yields `(index, component)` pairs in index order,
over a snapshot, so components may be added or erased while iterating.

Entity indices start at 1. `kill_entity` erases every component of the
entity, and `spawn_entity` reuses the most recently freed index first.
`kill_all_entities` resets allocation. `GameEngine` takes an optional
`clock` callable (default `time.perf_counter`) used to compute
`delta_time`.

Errors are exceptions from `starforge.errors`, all derived from
`EngineError`:

- `InvalidComponent` — a component type was used without being registered.
- `InvalidArgument` — an entity index is dead or unknown, or the entity
  already has a component of that type.
- `AssetAlreadyExists`, `AssetNotFound`, `AssetCastError` — raised by
  `AssetManager.add_asset`, `get_asset` and `remove_asset`.

```python
engine.add_asset("player", {"sprite": "ship.png"})
engine.get_asset("player", dict)     # checked against the expected type
engine.asset_exists("player")        # True
```

## Geometry

```python
from starforge.vector import Vector2
from starforge.angle import degrees
from starforge.color import Color
from starforge.rect import Rect

Vector2(1, 2) + Vector2(3, 4)            # Vector2(x=4, y=6)
str(Vector2(1, 2))                       # 'Vector2<int>(1, 2)'
degrees(-90).wrap_unsigned()             # Angle(degrees=270.0)
Color.from_int(0xFF000080)               # Color(r=255, g=0, b=0, a=128)
Rect(0, 0, 10, 10).find_intersection(Rect(5, 5, 10, 10))
# Rect(left=5, top=5, width=5, height=5)
```

Dividing an integer vector by an integer truncates toward zero. Rectangles
may have negative widths and heights; `contains` accepts a `Vector2` or two
coordinates and treats the right and bottom edges as outside.

## Events

`Event` pairs an `EventType` with its payload and checks that they match:
types such as `CLOSED` or `GAINED_FOCUS` take no payload, the others need
the matching payload class, otherwise `TypeError` is raised.

```python
from starforge.event import Event, EventType, TextEvent

event = Event(EventType.TEXT_ENTERED, TextEvent(ord("a")))
event.data.character()                   # 'a'
```

## Lobbies

```python
from starforge.lobby import ServerLobbyHandler, LobbyGame

owner_connection = object()              # any object standing for a connection
lobbies = ServerLobbyHandler()
lobby = lobbies.create_lobby(4, owner_connection, "my room")
lobbies.change_game(lobby.id)
assert lobby.game is LobbyGame.PONG
```

Server lobby ids are handed out from 0 upwards and the owner is the first
player. Players are compared by identity. On the client side,
`ClientLobbyHandler.create_lobby` takes the id the server announced, and
`ClientLobby.remove_player` removes players by id. For both handlers,
`get_lobby` returns `None` for an unknown id, and other operations on such
an id do nothing.

## What the package does not do

`starforge` holds game state and nothing else. It does not open windows,
draw sprites, play sound or read input devices: events are plain data that
some other code has to produce. It has no networking — lobbies only keep
track of who is in them, and nothing sends or receives messages. There is
no ready-made game, server program or command-line tool.