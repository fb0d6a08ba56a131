"""
Checklist Service — ordered task list plus the set of finished positions.

Done marks are stored by index, so deleting a task has to renumber every
mark after it or the wrong task shows up as finished.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set

from projectbuddy import config

logger = logging.getLogger(__name__)


class ChecklistService:
    def __init__(self, tasks: Optional[List[str]] = None) -> None:
        self.tasks: List[str] = list(config.DEFAULT_TASKS if tasks is None else tasks)
        self.done: Set[int] = set()

    def add(self, text: str) -> bool:
        """Append a task. Blank text is ignored (returns False)."""
        task = text.strip()
        if not task:
            return False
        self.tasks.append(task)
        logger.info("Task added: %s", task)
        return True

    def toggle(self, index: int) -> bool:
        """Flip the done mark at ``index``. Returns the new state."""
        self._check_index(index)
        if index in self.done:
            self.done.discard(index)
            return False
        self.done.add(index)
        return True

    def remove(self, index: int) -> str:
        """Delete the task at ``index`` and shift later done marks down by one."""
        self._check_index(index)
        removed = self.tasks.pop(index)
        self.done = {i - 1 if i > index else i for i in self.done if i != index}
        logger.info("Task removed: %s", removed)
        return removed

    def is_done(self, index: int) -> bool:
        return index in self.done

    def reset(self) -> None:
        self.tasks = list(config.DEFAULT_TASKS)
        self.done = set()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.tasks):
            raise IndexError(f"No task at index {index} ({len(self.tasks)} tasks).")
