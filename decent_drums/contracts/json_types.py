"""Generic JSON type aliases.

Tool arguments arrive as parsed JSON of unknown shape. Use these aliases in
function signatures until a guard in ``decent_drums.core.guards`` has narrowed
the value to one of the named shapes in ``decent_drums.contracts.kit_types``.

**Pydantic restriction:** do not use ``JSONValue`` or ``JSONObject`` in
Pydantic ``BaseModel`` fields: the recursive forward references cannot be
resolved at schema generation time.  Use ``dict[str, object]`` there.
"""

from __future__ import annotations

JSONValue = str | int | float | bool | None | list["JSONValue"] | dict[str, "JSONValue"]
"""Recursive JSON value, the most precise mypy-safe alternative to ``Any``."""

JSONObject = dict[str, JSONValue]
"""A JSON object with unknown key set."""
