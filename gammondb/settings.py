"""Server addresses stored in the settings table."""

from __future__ import annotations

from gammondb.database import Database


class SettingsDatabase(Database):
    """The list of known server addresses and the one in use."""

    _current_ip = 1

    def ips(self) -> list[str]:
        return [self._str(row[0]) for row in self._fetchall("SELECT ip FROM settings")]

    def add_ip(self, ip: str) -> None:
        self._execute("INSERT INTO settings (ip) VALUES (?)", (ip,))

    def ip(self) -> str:
        """The selected address, or an empty string if none is stored under it."""
        row = self._fetchone("SELECT ip FROM settings WHERE id = ?", (self._current_ip,))
        return self._str(row[0]) if row else ""

    def select_ip(self, ip_id: int) -> None:
        """Use the address stored under this row id."""
        self._current_ip = ip_id