import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from sqlmodel import Session, select

from app.db.models.tasks import Task, TaskType

logger = logging.getLogger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Seed YAML must contain a root mapping.")
    return data


def _parse_task(i: int, raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid task entry at index {i} (mapping expected).")
    try:
        return Task(
            text=str(raw["text"]),
            type=TaskType(raw["type"]),
            order_index=int(raw["order_index"]),
        )
    except KeyError as e:
        raise ValueError(f"Task entry at index {i} is missing {e}.")


# -----------------------------
# Seed Tasks
# -----------------------------
def seed_tasks(session: Session, data: Dict[str, Any]) -> int:
    """
    Insère les modèles de tâches si la table est vide.
    Idempotent : ne touche à rien si des modèles existent déjà.
    Retourne le nombre de lignes insérées.
    """
    if session.exec(select(Task)).first():
        logger.info("Task templates already present, nothing inserted.")
        return 0

    raw_tasks: List[Any] = data.get("tasks", [])
    if not raw_tasks:
        logger.warning("No task in seed YAML (key 'tasks').")
        return 0

    tasks = [_parse_task(i, raw) for i, raw in enumerate(raw_tasks)]
    indexes = [t.order_index for t in tasks]
    if len(set(indexes)) != len(indexes):
        raise ValueError("Duplicate order_index in seed YAML.")

    session.add_all(tasks)
    session.commit()
    logger.info("Inserted %d task templates.", len(tasks))
    return len(tasks)


def seed_all(*, session: Session, seed_path: str | Path) -> None:
    data = load_seed_yaml(seed_path)
    seed_tasks(session, data)
