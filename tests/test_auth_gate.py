# tests/test_auth_gate.py

from __future__ import annotations

import json
from pathlib import Path

import pytest
from sqlmodel import Session

from app.client.auth_gate import AuthGate
from app.client.bootstrap import create_auth_gate
from app.client.session import LocalSessionStore, SessionStatus
from app.client.view_model import TaskListViewModel
from app.core.errors import AuthError, ConnectivityError, ValidationError
from app.features.authentication.services import AuthService
from app.features.checklist.services import ChecklistService


@pytest.fixture()
def session_file(tmp_path: Path) -> Path:
    return tmp_path / "local" / "session.json"


@pytest.fixture()
def gate(auth_svc: AuthService, checklist_svc: ChecklistService, session_file: Path, seeded: int) -> AuthGate:
    gate = AuthGate(
        auth_svc=auth_svc,
        session_store=LocalSessionStore(session_file),
        view_model=TaskListViewModel(checklist_svc),
    )
    gate.restore()
    return gate


def test_starts_anonymous_without_record(gate: AuthGate) -> None:
    assert gate.context.status == SessionStatus.absent
    with pytest.raises(AuthError):
        gate.require_user()
    with pytest.raises(AuthError):
        gate.open_checklist()


@pytest.mark.parametrize("content", ["", "{not json", "[]", json.dumps({"user": {"id": "x"}})])
def test_unreadable_record_means_anonymous(gate: AuthGate, session_file: Path, content: str) -> None:
    session_file.parent.mkdir(parents=True, exist_ok=True)
    session_file.write_text(content, encoding="utf-8")
    assert gate.restore().status == SessionStatus.absent


def test_register_persists_session_and_opens_checklist(gate: AuthGate, session_file: Path, seeded: int) -> None:
    user = gate.register("alice", "secret1", "secret1")

    assert gate.context.status == SessionStatus.present
    assert gate.require_user() == user
    record = json.loads(session_file.read_text(encoding="utf-8"))
    assert record["user"]["username"] == "alice"
    assert "password_hash" not in record["user"]

    vm = gate.open_checklist()
    assert len(vm.items) == seeded
    assert vm.progress().percentage == 0


def test_failed_register_stays_anonymous(gate: AuthGate, session_file: Path) -> None:
    with pytest.raises(ValidationError):
        gate.register("alice", "12345", "12345")
    assert gate.context.status == SessionStatus.absent
    assert not session_file.exists()


def test_login_restore_logout_cycle(gate: AuthGate, auth_svc: AuthService, session: Session, session_file: Path) -> None:
    auth_svc.register("alice", "secret1")

    with pytest.raises(AuthError):
        gate.login("alice", "wrong-password")
    assert gate.context.status == SessionStatus.absent

    user = gate.login("alice", "secret1")
    gate.open_checklist()
    task = next(i for i in gate.view_model.items if i.kind == "task")
    gate.view_model.toggle(task.id)

    # Nouvelle "page" : même fichier, même base
    other = create_auth_gate(session, session_file=session_file)
    assert other.context.is_authenticated
    assert other.require_user().id == user.id
    assert other.open_checklist().get(task.id).completed is True

    gate.logout()
    assert gate.context.status == SessionStatus.absent
    assert gate.view_model.items == ()
    assert not session_file.exists()
    assert create_auth_gate(session, session_file=session_file).context.status == SessionStatus.absent


def test_unwritable_session_record_leaves_gate_anonymous(
    auth_svc: AuthService, checklist_svc: ChecklistService, tmp_path: Path, seeded: int
) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    gate = AuthGate(
        auth_svc=auth_svc,
        session_store=LocalSessionStore(blocker / "session.json"),
        view_model=TaskListViewModel(checklist_svc),
    )
    gate.restore()

    with pytest.raises(ConnectivityError):
        gate.register("alice", "secret1", "secret1")
    assert gate.context.status == SessionStatus.absent
    with pytest.raises(AuthError):
        gate.require_user()
