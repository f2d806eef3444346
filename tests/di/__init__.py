"""Mock providers for testing.

Importing this package registers each mock as a subclass of its component
base, which is how ``ProviderBase.implementation`` finds it.
"""

from .mailer import MockMailerProvider
from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockMailerProvider",
    "MockPersistenceProvider",
    "MockStorageProvider",
    "build_test_container",
]
