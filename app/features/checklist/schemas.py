"""
➡️ But : Formats d'entrée/sortie de la checklist.

Un élément affiché est un variant étiqueté sur `kind` :

HeadingItem → titre de section, sans état de complétion

TaskItem → tâche cochable

🔹 Avantages :

Le rendu se fait par dispatch sur le type, pas sur des champs optionnels.
"""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class HeadingItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    id: int
    text: str
    sequence_index: int


class TaskItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["task"] = "task"
    id: int
    text: str
    completed: bool = False
    sequence_index: int


ChecklistItem = Annotated[Union[HeadingItem, TaskItem], Field(discriminator="kind")]


class ProgressOut(BaseModel):
    percentage: int = Field(ge=0, le=100)
    completed: int
    total: int
    all_complete: bool


class ChecklistOut(BaseModel):
    items: List[ChecklistItem]
    progress: ProgressOut


class CompletionIn(BaseModel):
    completed: bool
