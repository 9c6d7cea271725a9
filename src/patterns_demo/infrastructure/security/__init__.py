from .password_hasher import WerkzeugPasswordHasher

__all__ = ['WerkzeugPasswordHasher']
