"""
Binding between the Django session and the vote tally.

The tally is stored in the session as a plain ordered dict under
SESSION_KEY. Every change goes through locked_tally(), which serializes
votes and resets on the same session so that two tabs voting at once
cannot overwrite each other's counts.
"""
import logging
import threading
import weakref
from contextlib import contextmanager

from .tally import TallyStore

logger = logging.getLogger(__name__)

SESSION_KEY = 'candidates'

_registry_lock = threading.Lock()
_session_locks = weakref.WeakValueDictionary()


def _lock_for(session_key):
    """Process-wide lock for one session key."""
    if session_key is None:
        # Sessions without a key have no cookie yet: nobody else can reach them
        return threading.Lock()

    with _registry_lock:
        lock = _session_locks.get(session_key)
        if lock is None:
            lock = threading.Lock()
            _session_locks[session_key] = lock
        return lock


def _build(counts):
    if counts is None:
        logger.debug("Initialized tally for new session")
        return TallyStore.fresh()
    return TallyStore(counts)


def read_tally(session):
    """
    Return the session's tally, creating it with zero counts on first access.
    """
    counts = session.get(SESSION_KEY)
    store = _build(counts)

    if counts is None:
        session[SESSION_KEY] = store.as_dict()

    return store


@contextmanager
def _session_lock(session):
    """
    Hold the session lock, then save the session before releasing it.

    Yields True when the session already existed (its cookie was issued).
    An existing session is marked clean after saving so the session
    middleware does not save a stale copy over a newer one; a new or
    re-created session stays dirty so its cookie gets issued.
    """
    session_key = session.session_key

    with _lock_for(session_key):
        yield session_key is not None

        session.save()

        # An expired session comes back with a new key and needs its cookie
        if session_key is not None and session.session_key == session_key:
            session.modified = False


@contextmanager
def locked_tally(session):
    """
    Load the tally under the session lock, yield it, then write it back.
    """
    with _session_lock(session) as existing:
        if existing:
            # Read what the store holds now, not a copy loaded before the lock
            counts = session.load().get(SESSION_KEY)
        else:
            counts = session.get(SESSION_KEY)

        store = _build(counts)
        yield store

        session[SESSION_KEY] = store.as_dict()


def reset_tally(session):
    """
    Replace the session's tally with the configured candidates at zero.
    Whatever was stored before is discarded unread.
    """
    with _session_lock(session):
        store = TallyStore.fresh()
        session[SESSION_KEY] = store.as_dict()
    return store
