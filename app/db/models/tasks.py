from enum import Enum
from typing import Optional

from sqlmodel import SQLModel, Field


class TaskType(str, Enum):
    heading = "heading"
    task = "task"


class Task(SQLModel, table=True):
    """Modèle de tâche partagé par tous les utilisateurs (créé au seed, jamais modifié)."""

    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    text: str
    type: TaskType = Field(description="heading | task")
    order_index: int = Field(index=True, description="Ordre d'affichage, indépendant de l'id")
