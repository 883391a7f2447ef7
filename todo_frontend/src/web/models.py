from __future__ import annotations

from typing import TypedDict


# PUBLIC_INTERFACE
class Todo(TypedDict):
    """
    A single todo row held by the in-memory store.

    Fields:
    - id: Opaque unique identifier (UUID4 text), assigned once and never reused
    - title: The text shown in the list (1..100 chars, validated via schemas)
    """

    id: str
    title: str
