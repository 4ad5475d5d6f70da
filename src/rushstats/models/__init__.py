"""Canonical payload models shared by the client and the controller."""

from .players import PlayersPage, PlayersQuery, Record, freeze_record

__all__ = ["PlayersPage", "PlayersQuery", "Record", "freeze_record"]
