"""A small plain-text table."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class Table:
    """Rows of text under a header line, rendered with ``str()``."""

    headers: list[str] = field(default_factory=list)
    body: list[list[str]] = field(default_factory=list)

    def add_row(self, row: Iterable[str]) -> None:
        """Append a copy of ``row`` to the body."""
        self.body.append(list(row))

    def _column_widths(self) -> list[int]:
        for row in self.body:
            if len(row) > len(self.headers):
                raise ValueError("a row has more cells than there are headers")
        return [
            max([len(header)] + [len(row[i]) for row in self.body if i < len(row)])
            for i, header in enumerate(self.headers)
        ]

    def __str__(self) -> str:
        if not self.headers and not self.body:
            return ""
        widths = self._column_widths()

        def centre(text: str, width: int) -> str:
            padding = max(width - len(text), 0)
            left = padding // 2
            return " " * left + text + " " * (padding - left)

        header = " | ".join(h.ljust(w) for h, w in zip(self.headers, widths))
        lines = [
            f"| {header} |",
            "|-" + "-+-".join("-" * w for w in widths) + "-|",
        ]
        lines.extend(
            "| " + " | ".join(centre(c, w) for c, w in zip(row, widths)) + " |"
            for row in self.body
        )
        return "".join(line + "\n" for line in lines)