import pytest
from django.core.cache import cache

from voting.tally import TallyStore

# ============================================================================
# Session Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clear_cache():
    """Sessions live in the local-memory cache; start every test empty."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def session():
    """A new cache-backed session without a key."""
    from django.contrib.sessions.backends.cache import SessionStore

    return SessionStore()


@pytest.fixture
def saved_session(session):
    """A cache-backed session that already has a key (cookie issued)."""
    session.create()
    return session


# ============================================================================
# Tally Fixtures
# ============================================================================


@pytest.fixture
def fresh_store():
    """Tally with the default candidates at zero."""
    return TallyStore.fresh()


@pytest.fixture
def sample_store():
    """Tally with 3, 1 and 0 votes."""
    return TallyStore({'Candidato A': 3, 'Candidato B': 1, 'Candidato C': 0})


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def api_client():
    """DRF client; keeps its session cookie across requests."""
    from rest_framework.test import APIClient

    return APIClient()
