from .user_store import InMemoryUserStore

__all__ = ['InMemoryUserStore']
