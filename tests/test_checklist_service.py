# tests/test_checklist_service.py

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from app.client.view_model import ItemState, TaskListViewModel
from app.core.errors import ConflictError, ConnectivityError, NotFoundError
from app.db.models.tasks import TaskType
from app.db.models.user_tasks import UserTask
from app.db.models.users import User
from app.features.authentication.services import AuthService
from app.features.checklist.schemas import HeadingItem, TaskItem
from app.features.checklist.services import ChecklistService

from .fakes import add_template, count


def test_items_follow_order_index_not_ids(
    auth_svc: AuthService, checklist_svc: ChecklistService, session: Session
) -> None:
    # Insérés à l'envers : les ids croissent quand order_index décroît
    add_template(session, "last task", TaskType.task, 2)
    add_template(session, "first task", TaskType.task, 1)
    add_template(session, "Heading", TaskType.heading, 0)
    user = auth_svc.register("alice", "secret1")

    items = checklist_svc.list_items(user.id)
    assert [i.text for i in items] == ["Heading", "first task", "last task"]
    assert isinstance(items[0], HeadingItem)
    assert all(isinstance(i, TaskItem) and i.completed is False for i in items[1:])


def test_set_completed_and_toggle(auth_svc: AuthService, checklist_svc: ChecklistService, seeded: int) -> None:
    user = auth_svc.register("alice", "secret1")
    task = next(i for i in checklist_svc.list_items(user.id) if isinstance(i, TaskItem))

    assert checklist_svc.set_completed(user.id, task.id, True).completed is True
    assert checklist_svc.toggle(user.id, task.id).completed is False
    assert checklist_svc.toggle(user.id, task.id).completed is True

    reloaded = {i.id: i for i in checklist_svc.list_items(user.id)}
    assert reloaded[task.id].completed is True


def test_headings_cannot_be_completed(auth_svc: AuthService, checklist_svc: ChecklistService, seeded: int) -> None:
    user = auth_svc.register("alice", "secret1")
    heading = next(i for i in checklist_svc.list_items(user.id) if isinstance(i, HeadingItem))
    with pytest.raises(ConflictError):
        checklist_svc.set_completed(user.id, heading.id, True)


def test_other_users_items_are_not_found(
    auth_svc: AuthService, checklist_svc: ChecklistService, seeded: int
) -> None:
    alice = auth_svc.register("alice", "secret1")
    bob = auth_svc.register("bob", "secret1")
    alice_task = next(i for i in checklist_svc.list_items(alice.id) if isinstance(i, TaskItem))

    with pytest.raises(NotFoundError):
        checklist_svc.set_completed(bob.id, alice_task.id, True)
    with pytest.raises(NotFoundError):
        checklist_svc.toggle(bob.id, 999_999)


def test_query_failure_is_a_connectivity_error(
    checklist_svc: ChecklistService, monkeypatch: pytest.MonkeyPatch
) -> None:
    def boom(user_id):
        raise OperationalError("SELECT", {}, Exception("database is gone"))

    monkeypatch.setattr(checklist_svc.repo, "list_for_user", boom)
    with pytest.raises(ConnectivityError):
        checklist_svc.list_items(1)


def test_user_deletion_cascades(auth_svc: AuthService, session: Session, seeded: int) -> None:
    user = auth_svc.register("alice", "secret1")
    assert count(session, UserTask) == seeded

    session.delete(session.get(User, user.id))
    session.commit()
    session.expire_all()
    assert session.exec(select(UserTask).where(UserTask.user_id == user.id)).all() == []


def test_failed_write_rolls_back_view_model_and_row(
    auth_svc: AuthService, checklist_svc: ChecklistService, seeded: int, monkeypatch: pytest.MonkeyPatch
) -> None:
    user = auth_svc.register("alice", "secret1")
    vm = TaskListViewModel(checklist_svc)
    vm.load(user.id)
    task = next(i for i in vm.items if isinstance(i, TaskItem))

    def boom(entity, **changes):
        raise OperationalError("UPDATE", {}, Exception("database is gone"))

    monkeypatch.setattr(checklist_svc.repo, "update", boom)
    with pytest.raises(ConnectivityError):
        checklist_svc.set_completed(user.id, task.id, True)
    with pytest.raises(ConnectivityError):
        vm.toggle(task.id)
    assert vm.get(task.id).completed is False
    assert vm.state_of(task.id) == ItemState.settled

    monkeypatch.undo()
    vm.load(user.id)
    assert vm.get(task.id).completed is False
    assert {i.id: i for i in checklist_svc.list_items(user.id)}[task.id].completed is False
