"""Client-side view of the lobbies announced by the server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ClientLobbyPlayer:
    """A player as the client knows it: a name, a server id and readiness."""

    name: str
    id: int
    ready: bool = False


class ClientLobby:
    """A lobby mirrored on the client; the owner is its first player."""

    def __init__(self, size: int, owner: ClientLobbyPlayer, name: str, lobby_id: int) -> None:
        self.size = size
        self.owner = owner
        self.name = name
        self.id = lobby_id
        self._players: list[ClientLobbyPlayer] = [owner]

    @property
    def players(self) -> list[ClientLobbyPlayer]:
        return list(self._players)

    @players.setter
    def players(self, players: list[ClientLobbyPlayer]) -> None:
        self._players = list(players)

    def add_player(self, player: ClientLobbyPlayer) -> None:
        self._players.append(player)

    def remove_player(self, player_id: int) -> None:
        """Remove every player with this id."""
        self._players = [p for p in self._players if p.id != player_id]

    def __str__(self) -> str:
        lines = [f"Lobby {self.name} (id {self.id}) {len(self._players)}/{self.size}"]
        lines.append(f"owner: {self.owner.name} ({self.owner.id})")
        for player in self._players:
            state = "ready" if player.ready else "not ready"
            lines.append(f"- {player.name} ({player.id}) {state}")
        return "\n".join(lines)

    def display(self) -> str:
        """Print the lobby and its players, and return the printed text."""
        text = str(self)
        print(text)
        return text


class ClientLobbyHandler:
    """Lobbies known to the client, keyed by the ids the server gave them.

    Operations on an unknown lobby id do nothing.
    """

    def __init__(self) -> None:
        self._lobbies: list[ClientLobby] = []

    @property
    def lobbies(self) -> list[ClientLobby]:
        return list(self._lobbies)

    def create_lobby(
        self, size: int, owner: ClientLobbyPlayer, name: str, lobby_id: int
    ) -> ClientLobby:
        lobby = ClientLobby(size, owner, name, lobby_id)
        self._lobbies.append(lobby)
        return lobby

    def get_lobby(self, lobby_id: int) -> ClientLobby | None:
        return next((lobby for lobby in self._lobbies if lobby.id == lobby_id), None)

    def remove_lobby(self, lobby_id: int) -> None:
        lobby = self.get_lobby(lobby_id)
        if lobby is not None:
            self._lobbies.remove(lobby)

    def add_player_to_lobby(self, lobby_id: int, player: ClientLobbyPlayer) -> None:
        lobby = self.get_lobby(lobby_id)
        if lobby is not None:
            lobby.add_player(player)

    def remove_player_from_lobby(self, lobby_id: int, player_id: int) -> None:
        lobby = self.get_lobby(lobby_id)
        if lobby is not None:
            lobby.remove_player(player_id)

    def set_name(self, lobby_id: int, name: str) -> None:
        lobby = self.get_lobby(lobby_id)
        if lobby is not None:
            lobby.name = name