from __future__ import annotations

import os
import shutil
import tempfile

import pytest

# Settings are read at import time, so point them at a scratch directory
# before anything from property_site is imported.
_TMP_ROOT = tempfile.mkdtemp(prefix="property-site-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_ROOT, 'test.db')}"
os.environ["PUBLIC_DIR"] = os.path.join(_TMP_ROOT, "public")
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_ROOT, "public", "uploads")
os.environ.pop("CLEANUP_FAILED_UPLOADS", None)

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.exc import OperationalError  # noqa: E402

from property_site.core.config import settings  # noqa: E402
from property_site.db.base import Base  # noqa: E402
from property_site.db.session import SessionLocal, engine, get_db  # noqa: E402
from property_site.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_storage():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    shutil.rmtree(settings.UPLOAD_DIR, ignore_errors=True)
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def uploaded_files():
    return lambda: sorted(os.listdir(settings.UPLOAD_DIR))


class BrokenSession:
    """Stands in for a Session whose database has gone away."""

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    add = _fail
    execute = _fail
    commit = _fail
    refresh = _fail

    def rollback(self) -> None:
        pass

    def close(self) -> None:
        pass


@pytest.fixture
def broken_db():
    def _get_broken_db():
        yield BrokenSession()

    app.dependency_overrides[get_db] = _get_broken_db
    yield
    app.dependency_overrides.pop(get_db, None)
