from typing import Sequence
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.db.models.tasks import Task

class TaskRepository(BaseRepository[Task]):
    """Modèles de tâches : lecture seule à l'exécution, écrits par le seed."""
    model = Task

    def list_ordered(self) -> Sequence[Task]:
        return self.session.exec(
            select(self.model).order_by(self.model.order_index.asc(), self.model.id.asc())
        ).all()
