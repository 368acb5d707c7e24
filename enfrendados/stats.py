"""Ranking of the best results, kept in descending order of score."""

from __future__ import annotations

from typing import List, Tuple


class Ranking:
    """A bounded high-score table, best score first."""

    def __init__(self, capacity: int = 4) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: List[Tuple[str, int]] = []

    def add(self, name: str, score: int) -> None:
        """Insert a result ahead of the first strictly lower score, keeping the top entries."""
        position = next(
            (i for i, (_, existing) in enumerate(self._entries) if score > existing),
            len(self._entries),
        )
        if position >= self.capacity:
            return
        self._entries.insert(position, (name, score))
        del self._entries[self.capacity:]

    def entries(self) -> List[Tuple[str, int]]:
        """Return the (name, score) pairs, best first."""
        return list(self._entries)

    def render(self) -> str:
        """Return the table as printed on screen."""
        lines = [f"===== TOP {self.capacity} JUGADORES ====="]
        if not self._entries:
            lines.append("No hay estadisticas disponibles.")
        else:
            lines.extend(
                f"{place:>2}. {name:<15} - {score} pts"
                for place, (name, score) in enumerate(self._entries, start=1)
            )
        lines.append("===========================")
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return len(self._entries)