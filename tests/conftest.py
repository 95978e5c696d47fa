import asyncio
import os
import tempfile
from types import SimpleNamespace

import pytest

# Configure before the app module reads Config
os.environ["PERSISTENCE_BACKEND"] = "memory"
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="chatline-uploads-"))

from fastapi.testclient import TestClient

from chatline.application.commands.users import LoginOrCreateCommand, LoginOrCreateHandler
from chatline.application.common.authorization import AuthorizationGuard
from chatline.application.common.context import RequestContext
from chatline.domain.value_objects import UserName
from chatline.fastapi_app import create_fastapi_app
from chatline.infrastructure.persistence.memory import (
    InMemoryCommentRepository,
    InMemoryConversationRepository,
    InMemoryMessageRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from chatline.infrastructure.storage import MediaStorageService
from chatline.setup.ioc import create_container


@pytest.fixture()
def app():
    """Create a new FastAPI app with its own in-memory store for each test."""
    return create_fastapi_app(create_container("memory"))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def login(client):
    """Log in by name; returns (user json, auth headers)."""

    def _login(username):
        res = client.post("/session", json={"username": username})
        assert res.status_code == 200, res.text
        body = res.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}

    return _login


@pytest.fixture()
def auth_headers(login):
    """Authentication headers for a logged-in user named alice."""
    _, headers = login("alice")
    return headers


# ==================== HANDLER-LEVEL FIXTURES ====================


@pytest.fixture()
def repos():
    store = InMemoryStore()
    return SimpleNamespace(
        store=store,
        users=InMemoryUserRepository(store),
        conversations=InMemoryConversationRepository(store),
        messages=InMemoryMessageRepository(store),
        comments=InMemoryCommentRepository(store),
    )


@pytest.fixture()
def ctx():
    return RequestContext(correlation_id="test")


@pytest.fixture()
def guard(repos):
    return AuthorizationGuard(repos.conversations, repos.comments)


@pytest.fixture()
def media_storage(tmp_path):
    return MediaStorageService(upload_dir=str(tmp_path), max_upload_mb=1)


@pytest.fixture()
def make_user(repos, ctx):
    """Create (or fetch) a user by name through the login handler."""

    def _make_user(name):
        handler = LoginOrCreateHandler(repos.users, ctx)
        return asyncio.run(handler.execute(LoginOrCreateCommand(name=UserName(name)))).user

    return _make_user
