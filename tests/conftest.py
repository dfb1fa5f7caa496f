import os
import tempfile

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="serene-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'serene.sqlite3')}"
os.environ["AI_RATE_LIMIT"] = "1000/minute"
os.environ["SEED_DEFAULT_HABITS"] = "false"
os.environ.setdefault("ENV", "production")

from fastapi.testclient import TestClient  # noqa: E402

from serene.main import app  # noqa: E402
from serene.models import database  # noqa: E402


@pytest.fixture(autouse=True)
def tables():
    database.Base.metadata.create_all(bind=database.engine)
    yield
    database.Base.metadata.drop_all(bind=database.engine)


@pytest.fixture
def db():
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def fake_llm(monkeypatch):
    """Replace the model call with a canned reply; returns the list of prompts sent."""
    prompts = []

    def install(reply):
        def _reply(prompt):
            prompts.append(prompt)
            if isinstance(reply, Exception):
                raise reply
            return reply

        monkeypatch.setattr("serene.services.sentiment_service.get_llm_reply", _reply)
        return prompts

    return install
