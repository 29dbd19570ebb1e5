from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from .base import BaseModelDB


class UserTask(BaseModelDB, table=True):
    """
    État de complétion d'une tâche pour un utilisateur.
    Une ligne par couple (user, task) ; supprimée en cascade avec l'utilisateur.
    """

    __tablename__ = "user_tasks"
    __table_args__ = (UniqueConstraint("user_id", "task_id", name="uq_user_tasks_user_task"),)

    user_id: int = Field(index=True, foreign_key="users.id", ondelete="CASCADE")
    task_id: int = Field(index=True, foreign_key="tasks.id", ondelete="CASCADE")
    completed: bool = Field(default=False)
