"""The stored login of the local player."""

from __future__ import annotations

from gammondb.database import Database


class LoginDatabase(Database):
    """User name, token and id kept in the login table."""

    @property
    def username(self) -> str:
        row = self._fetchone("SELECT username FROM login")
        return self._str(row[0]) if row else ""

    @username.setter
    def username(self, value: str) -> None:
        self._execute("UPDATE login SET username = ?", (value,))

    @property
    def auth_token(self) -> str:
        row = self._fetchone("SELECT auth_token FROM login")
        return self._str(row[0]) if row else ""

    @auth_token.setter
    def auth_token(self, value: str) -> None:
        self._execute("UPDATE login SET auth_token = ?", (value,))

    @property
    def user_id(self) -> int:
        """The stored id, 0 if unset, or -1 if there is no login row."""
        row = self._fetchone("SELECT id FROM login")
        return self._int(row[0]) if row else -1

    @user_id.setter
    def user_id(self, value: int) -> None:
        self._execute("UPDATE login SET id = ?", (value,))