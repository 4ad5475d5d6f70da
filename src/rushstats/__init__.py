"""Browse, sort and export paged NFL rushing statistics."""

from .client import PlayerSource, PlayersClient, PlayersFetchError
from .controller import DashboardController, NavigationIntent, ViewState
from .export import CsvExport, ExportUnavailableError, serialize_records

__all__ = [
    "CsvExport",
    "DashboardController",
    "ExportUnavailableError",
    "NavigationIntent",
    "PlayerSource",
    "PlayersClient",
    "PlayersFetchError",
    "ViewState",
    "serialize_records",
]
