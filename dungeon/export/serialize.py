"""Text producers for finished levels: JSON and CSV.

Both read the Level through its public exports (`to_dict`, `board_to_csv`)
and never touch the grid directly.
"""

from __future__ import annotations

import csv
import io
import json

from dungeon.environment.level import Level


def level_to_json(level: Level, indent: int | None = None) -> str:
    """Serialize a level's structured export to JSON."""
    return json.dumps(level.to_dict(), indent=indent)


def level_from_json(text: str) -> Level:
    """Rebuild a level from `level_to_json` output.

    Raises:
        ValueError: If the text is not valid JSON or the tile array does not
            match the declared dimensions.
        KeyError: If a required field is missing.
    """
    return Level.from_dict(json.loads(text))


def level_to_csv(level: Level) -> str:
    """One line per row, tile codes separated by commas."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(level.board_to_csv())
    return buffer.getvalue()
