"""Server-side lobbies: groups of connections waiting to start a game."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class LobbyStatus(IntEnum):
    WAITING = 0
    INGAME = 1


class LobbyGame(IntEnum):
    RTYPE = 0
    PONG = 1


class Lobby:
    """A lobby owned by one connection, holding the connections that joined.

    Players are compared by identity, so any connection object will do.
    The owner is the first player of a new lobby.
    """

    def __init__(self, size: int, owner: Any, name: str, lobby_id: int) -> None:
        self.size = size
        self.id = lobby_id
        self.status = LobbyStatus.WAITING
        self.game = LobbyGame.RTYPE
        self.owner = owner
        self.name = name
        self.map = ""
        self.is_map_set = False
        self._players: list[Any] = [owner]

    @property
    def players(self) -> list[Any]:
        """A copy of the players currently in the lobby."""
        return list(self._players)

    def add_player(self, player: Any) -> None:
        self._players.append(player)

    def remove_player(self, player: Any) -> None:
        """Remove every occurrence of this very connection."""
        self._players = [p for p in self._players if p is not player]

    def start_game(self) -> None:
        self.status = LobbyStatus.INGAME

    def change_game(self) -> None:
        """Switch between the two games."""
        self.game = LobbyGame.PONG if self.game is LobbyGame.RTYPE else LobbyGame.RTYPE

    def set_map(self, map_name: str) -> None:
        self.map = map_name
        self.is_map_set = True

    def __repr__(self) -> str:
        return (
            f"Lobby(id={self.id}, name={self.name!r}, size={self.size}, "
            f"players={len(self._players)}, game={self.game.name}, status={self.status.name})"
        )


class ServerLobbyHandler:
    """Creates lobbies with increasing ids and forwards operations to them.

    Operations on an unknown lobby id do nothing.
    """

    def __init__(self) -> None:
        self._lobbies: list[Lobby] = []
        self._next_id = 0

    @property
    def lobbies(self) -> list[Lobby]:
        """The lobbies, in creation order."""
        return list(self._lobbies)

    def create_lobby(self, size: int, owner: Any, name: str) -> Lobby:
        lobby = Lobby(size, owner, name, self._next_id)
        self._next_id += 1
        self._lobbies.append(lobby)
        return lobby

    def get_lobby(self, lobby_id: int) -> Lobby | None:
        return next((lobby for lobby in self._lobbies if lobby.id == lobby_id), None)

    def remove_lobby(self, lobby_id: int) -> None:
        lobby = self.get_lobby(lobby_id)
        if lobby is not None:
            self._lobbies.remove(lobby)

    def add_player_to_lobby(self, lobby_id: int, player: Any) -> None:
        lobby = self.get_lobby(lobby_id)
        if lobby is not None:
            lobby.add_player(player)

    def remove_player_from_lobby(self, lobby_id: int, player: Any) -> None:
        lobby = self.get_lobby(lobby_id)
        if lobby is not None:
            lobby.remove_player(player)

    def start_game(self, lobby_id: int) -> None:
        lobby = self.get_lobby(lobby_id)
        if lobby is not None:
            lobby.start_game()

    def change_game(self, lobby_id: int) -> None:
        lobby = self.get_lobby(lobby_id)
        if lobby is not None:
            lobby.change_game()

    def set_name(self, lobby_id: int, name: str) -> None:
        lobby = self.get_lobby(lobby_id)
        if lobby is not None:
            lobby.name = name

    def set_map(self, lobby_id: int, map_name: str) -> None:
        lobby = self.get_lobby(lobby_id)
        if lobby is not None:
            lobby.set_map(map_name)