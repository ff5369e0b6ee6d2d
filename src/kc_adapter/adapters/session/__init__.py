"""Session adapter – key-path writer used to publish token expiration."""
from kc_adapter.adapters.session.store import ACCESS_TOKEN_EXPIRATION_KEY, InMemorySessionStore, SessionWriter

__all__ = ["ACCESS_TOKEN_EXPIRATION_KEY", "InMemorySessionStore", "SessionWriter"]
