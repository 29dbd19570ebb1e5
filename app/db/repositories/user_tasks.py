from typing import Optional, Sequence, Tuple
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.tasks import Task
from app.db.models.user_tasks import UserTask

class UserTaskRepository(BaseRepository[UserTask]):
    """CRUD user_tasks + jointure avec le modèle de tâche."""
    model = UserTask

    def list_for_user(self, user_id: int) -> Sequence[Tuple[UserTask, Task]]:
        """
        Retourne les couples (instance, modèle) d'un utilisateur,
        triés par order_index du modèle (et non par id d'instance).
        """
        return self.session.exec(
            select(UserTask, Task)
            .join(Task, Task.id == UserTask.task_id)
            .where(UserTask.user_id == user_id)
            .order_by(Task.order_index.asc(), Task.id.asc())
        ).all()

    def get_for_user(self, user_id: int, user_task_id: int) -> Optional[Tuple[UserTask, Task]]:
        return self.session.exec(
            select(UserTask, Task)
            .join(Task, Task.id == UserTask.task_id)
            .where(UserTask.id == user_task_id)
            .where(UserTask.user_id == user_id)
        ).first()
