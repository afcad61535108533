import pytest
from fastapi.testclient import TestClient

from config import settings
from core.auth import sign_session
from core.cache import cache_invalidate_multi
from core.credits import get_credit_repository, get_tier_resolver
from core.models import Viewer
from core.usermeta import InMemoryUserMetaStore, get_user_meta_store


class FakeCreditRepository:
    def __init__(self, balance=None, error=None):
        self.balance = balance
        self.error = error

    async def get_balance(self, user_id):
        if self.error:
            raise self.error
        return self.balance


class FakeTierResolver:
    def __init__(self, tier=None):
        self.tier = tier

    async def get_user_tier(self, user_id):
        return self.tier


@pytest.fixture(autouse=True)
def clear_caches():
    cache_invalidate_multi(["usermeta", "nav", "credits"])
    yield
    cache_invalidate_multi(["usermeta", "nav", "credits"])


@pytest.fixture
def viewer():
    return Viewer(
        id=7,
        display_name="Ada Lovelace",
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
    )


@pytest.fixture
def store():
    return InMemoryUserMetaStore()


@pytest.fixture
def credit_repository():
    return FakeCreditRepository()


@pytest.fixture
def tier_resolver():
    return FakeTierResolver()


@pytest.fixture
def client(store, credit_repository, tier_resolver):
    from main import app

    app.dependency_overrides[get_user_meta_store] = lambda: store
    app.dependency_overrides[get_credit_repository] = lambda: credit_repository
    app.dependency_overrides[get_tier_resolver] = lambda: tier_resolver
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def signed_in(client, viewer):
    client.cookies.set(settings.session_cookie, sign_session(viewer))
    return client
