from .session_store import SessionStore, InMemorySessionStore, StreamlitSessionStore
from .cache import SessionCache
from .api_client import StudentApiClient

__all__ = [
    'SessionStore',
    'InMemorySessionStore',
    'StreamlitSessionStore',
    'SessionCache',
    'StudentApiClient',
]
