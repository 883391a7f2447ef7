from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from threading import RLock
from typing import List, Optional

from fastapi import Request

from .models import Todo


# PUBLIC_INTERFACE
class TodoStore(ABC):
    """Abstract contract for the ordered todo list owned by the application."""

    @abstractmethod
    def list(self) -> List[Todo]:
        """Return all todos in insertion order."""

    @abstractmethod
    def append(self, title: str) -> Todo:
        """Create a todo with a fresh id, add it at the end and return it."""

    @abstractmethod
    def remove(self, todo_id: str) -> bool:
        """Remove the todo with the given id. Return True if removed, False if not found."""

    @abstractmethod
    def get(self, todo_id: str) -> Optional[Todo]:
        """Return the todo with the given id, or None if not found."""


class InMemoryTodoStore(TodoStore):
    """
    Thread-safe in-memory store. Contents live as long as the store object.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: list[Todo] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _new_id(self) -> str:
        return str(uuid.uuid4())

    def list(self) -> List[Todo]:
        with self._lock:
            # Return copies to avoid external mutation
            return [t.copy() for t in self._items]

    def append(self, title: str) -> Todo:
        todo: Todo = {"id": self._new_id(), "title": title}
        with self._lock:
            self._items.append(todo)
        return todo.copy()

    def remove(self, todo_id: str) -> bool:
        with self._lock:
            for i, todo in enumerate(self._items):
                if todo["id"] == todo_id:
                    del self._items[i]
                    return True
            return False

    def get(self, todo_id: str) -> Optional[Todo]:
        with self._lock:
            for todo in self._items:
                if todo["id"] == todo_id:
                    return todo.copy()
            return None


# PUBLIC_INTERFACE
def get_store(request: Request) -> TodoStore:
    """
    Dependency returning the store attached to the running application by
    create_app().
    """
    return request.app.state.store
