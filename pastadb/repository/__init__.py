"""Repository layer: DB access helpers (SQLite).

Keep functions thin and focused, so services avoid SQL strings.
Every function here works on an already-open connection.
"""
from __future__ import annotations
