"""
Shared fixtures: a fresh SQLite database per test.
"""

import pytest
from fastapi.testclient import TestClient

from church_records_api.app.core.context import Repositories, init_repositories
from church_records_api.app.main import create_app
from church_records_api.app.schemas.member import MemberRead
from church_records_api.app.services.member_service import MemberService


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "records.db")


@pytest.fixture
def repos(db_path) -> Repositories:
    """Entity stores backed by a temporary database."""
    return init_repositories(db_path)


@pytest.fixture
def member(repos) -> MemberRead:
    return MemberService.create_member(
        repos, {"name": "Ana", "contact": "a@x.com", "membershipStatus": "Active"}
    )


@pytest.fixture
def client(repos) -> TestClient:
    """Test client serving ``repos``."""
    return TestClient(create_app(repositories=repos))
