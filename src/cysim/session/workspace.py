"""Ephemeral editor and output state."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.types import Outcome


@dataclass
class Workspace:
    code_input: str = ""
    output: Outcome | None = None
    expanded: bool = False
    menu_open: bool = False

    def toggle_expanded(self) -> bool:
        self.expanded = not self.expanded
        return self.expanded

    def toggle_menu(self) -> bool:
        self.menu_open = not self.menu_open
        return self.menu_open

    def reset(self) -> None:
        self.code_input = ""
        self.output = None
        self.menu_open = False
