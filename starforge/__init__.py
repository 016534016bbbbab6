"""Entity-component-system game engine core with geometry types, input event data and lobby bookkeeping."""

__version__ = "0.1.0"