"""
➡️ But : Logique métier de la checklist d'un utilisateur.

ChecklistService : lecture ordonnée des tâches (jointure user_tasks ⨝ tasks) et mise à jour
du champ `completed` d'une ligne.

compute_progress() : calcul pur du pourcentage, partagé par l'API et le view-model.

🔹 Avantages :

Code métier découplé du web : le view-model client l'utilise comme "store distant".
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Sequence

from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import ConflictError, ConnectivityError, NotFoundError
from app.db.models.tasks import Task, TaskType
from app.db.models.user_tasks import UserTask
from app.db.repositories.user_tasks import UserTaskRepository
from app.features.checklist.schemas import ChecklistItem, HeadingItem, ProgressOut, TaskItem

logger = logging.getLogger(__name__)


def to_item(user_task: UserTask, task: Task) -> ChecklistItem:
    if task.type == TaskType.heading:
        return HeadingItem(id=user_task.id, text=task.text, sequence_index=task.order_index)
    return TaskItem(
        id=user_task.id,
        text=task.text,
        completed=user_task.completed,
        sequence_index=task.order_index,
    )


def compute_progress(items: Sequence[ChecklistItem]) -> ProgressOut:
    """
    Les titres sont exclus ; arrondi au plus proche, .5 vers le haut.
    100 est réservé à la liste entièrement cochée (199/200 affiche 99).
    """
    tasks = [i for i in items if isinstance(i, TaskItem)]
    total = len(tasks)
    done = sum(1 for t in tasks if t.completed)
    percentage = (200 * done + total) // (2 * total) if total else 0
    if done < total:
        percentage = min(percentage, 99)
    return ProgressOut(
        percentage=percentage,
        completed=done,
        total=total,
        all_complete=total > 0 and done == total,
    )


class ChecklistService:
    def __init__(
        self,
        *,
        user_task_repo: UserTaskRepository,
        now_fn: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.repo = user_task_repo
        self.now_fn = now_fn

    def list_items(self, user_id: int) -> List[ChecklistItem]:
        try:
            rows = self.repo.list_for_user(user_id)
        except SQLAlchemyError as e:
            logger.error("Could not fetch tasks for user %s: %s", user_id, e)
            raise ConnectivityError("Could not load your tasks from the database")
        return [to_item(user_task, task) for user_task, task in rows]

    def set_completed(self, user_id: int, item_id: int, completed: bool) -> TaskItem:
        session = self.repo.session
        try:
            row = self.repo.get_for_user(user_id, item_id)
            if row is None:
                raise NotFoundError("Task not found")
            user_task, task = row
            if task.type == TaskType.heading:
                raise ConflictError("Headings cannot be completed")
            self.repo.update(user_task, completed=completed, updated_at=self.now_fn())
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Could not update task %s for user %s: %s", item_id, user_id, e)
            raise ConnectivityError("Failed to update the task, please try again")
        return to_item(user_task, task)

    def toggle(self, user_id: int, item_id: int) -> TaskItem:
        """Inverse l'état en base (lecture puis écriture, dernier écrivain gagnant)."""
        try:
            row = self.repo.get_for_user(user_id, item_id)
        except SQLAlchemyError as e:
            logger.error("Could not read task %s for user %s: %s", item_id, user_id, e)
            raise ConnectivityError("Failed to update the task, please try again")
        if row is None:
            raise NotFoundError("Task not found")
        return self.set_completed(user_id, item_id, not row[0].completed)
