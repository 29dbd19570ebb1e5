"""
➡️ But : État de la liste de tâches affichée à l'utilisateur.

TaskListViewModel garde une copie locale (potentiellement périmée) des éléments,
calcule la progression et applique les bascules de façon optimiste :

settled(v) → pending(v→v') → settled(v') si l'écriture distante réussit
                            → settled(v)  sinon (compensation locale)

La copie n'est réconciliée avec la base que par un nouveau load() ou une bascule.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Protocol, Tuple

from app.core.errors import ChecklistError
from app.features.checklist.schemas import ChecklistItem, ProgressOut, TaskItem
from app.features.checklist.services import compute_progress

logger = logging.getLogger(__name__)


class ChecklistStore(Protocol):
    """Store distant consommé par le view-model (ChecklistService en pratique)."""

    def list_items(self, user_id: int) -> List[ChecklistItem]: ...

    def set_completed(self, user_id: int, item_id: int, completed: bool) -> TaskItem: ...


class ItemState(str, Enum):
    settled = "settled"
    pending = "pending"


@dataclass(frozen=True)
class PendingChange:
    previous: bool
    target: bool


class TaskListViewModel:
    def __init__(self, store: ChecklistStore):
        self.store = store
        self.user_id: Optional[int] = None
        self._items: List[ChecklistItem] = []
        self._pending: Dict[int, PendingChange] = {}

    @property
    def items(self) -> Tuple[ChecklistItem, ...]:
        return tuple(self._items)

    def load(self, user_id: int) -> Tuple[ChecklistItem, ...]:
        # En cas d'échec, ConnectivityError remonte et la liste actuelle est conservée
        items = self.store.list_items(user_id)
        self.user_id = user_id
        self._items = list(items)
        self._pending.clear()
        logger.debug("Loaded %d items for user %s", len(self._items), user_id)
        return self.items

    def get(self, item_id: int) -> Optional[ChecklistItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def state_of(self, item_id: int) -> ItemState:
        return ItemState.pending if item_id in self._pending else ItemState.settled

    def pending_change(self, item_id: int) -> Optional[PendingChange]:
        return self._pending.get(item_id)

    def _set_completed(self, item_id: int, completed: bool) -> None:
        for idx, item in enumerate(self._items):
            if item.id == item_id and isinstance(item, TaskItem):
                self._items[idx] = item.model_copy(update={"completed": completed})
                return

    def toggle(self, item_id: int) -> Optional[TaskItem]:
        """
        Bascule optimiste. Retourne l'élément à jour, ou None si l'id est
        inconnu ou désigne un titre. Lève l'erreur du store après rollback.
        """
        item = self.get(item_id)
        if not isinstance(item, TaskItem):
            return None

        change = PendingChange(previous=item.completed, target=not item.completed)
        self._set_completed(item_id, change.target)
        self._pending[item_id] = change
        try:
            self.store.set_completed(self.user_id, item_id, change.target)
        except ChecklistError as e:
            self._set_completed(item_id, change.previous)
            logger.warning("Rolled back item %s: %s", item_id, e)
            raise
        finally:
            if self._pending.get(item_id) is change:
                del self._pending[item_id]
        return self.get(item_id)  # type: ignore[return-value]

    def progress(self) -> ProgressOut:
        return compute_progress(self._items)

    def clear(self) -> None:
        self.user_id = None
        self._items = []
        self._pending.clear()

