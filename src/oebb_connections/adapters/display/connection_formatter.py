"""Plain-text rendering of refresh results."""

from datetime import datetime
from zoneinfo import ZoneInfo

from oebb_connections.domain.models.connection import Connection
from oebb_connections.domain.models.refresh_result import RefreshResult
from oebb_connections.domain.ports.display_adapter import ConnectionDisplay


class ConnectionFormatter(ConnectionDisplay):
    """Formats connections as terminal lines in the configured timezone."""

    def __init__(self, timezone: str = "Europe/Vienna") -> None:
        """Initialize the formatter.

        Args:
            timezone: IANA timezone name used for all displayed times.
        """
        self._timezone = ZoneInfo(timezone)

    def format_time(self, value: datetime) -> str:
        """Format a timestamp as HH:MM in the configured timezone."""
        return value.astimezone(self._timezone).strftime("%H:%M")

    @staticmethod
    def format_transfers(transfers: int) -> str:
        if transfers <= 0:
            return ""
        return f"{transfers} Umstieg{'e' if transfers > 1 else ''}"

    def format_connection(self, connection: Connection) -> str:
        """Format one connection as a single line."""
        leg = connection.journey.first_transport_leg
        line_name = leg.line.name if leg.line else "?"
        direction = leg.direction or (leg.line.direction if leg.line else None) or ""
        delay = leg.delay_minutes

        parts = [
            self.format_time(connection.departure) + (f" +{delay}" if delay > 0 else ""),
            line_name,
            direction,
            f"Gleis {leg.platform or '?'}",
            f"Ankunft: {self.format_time(connection.arrival)}",
            f"{connection.duration_minutes} Min",
        ]
        transfers = self.format_transfers(connection.transfers)
        if transfers:
            parts.append(transfers)
        for label, arrival in connection.auxiliary_arrivals.items():
            parts.append(f"{label}: {self.format_time(arrival)}")

        return "  ".join(part for part in parts if part)

    def render(self, route_label: str, result: RefreshResult) -> str:
        """Render a refresh result with header, status line and connections."""
        lines = [f"{route_label}  (Aktualisiert: {self.format_time(result.updated_at)})"]

        if result.status == "offline":
            if result.from_cache:
                lines.append("Offline - zeige gespeicherte Daten")
            elif result.error is not None:
                lines.append(f"Fehler beim Laden der Verbindungen: {result.error.reason}")
        elif result.from_cache:
            lines.append("Keine aktuellen Daten - zeige gespeicherte Daten")

        if not result.connections:
            lines.append("Keine Verbindungen gefunden")
        else:
            lines.extend(self.format_connection(c) for c in result.connections)

        return "\n".join(lines)
