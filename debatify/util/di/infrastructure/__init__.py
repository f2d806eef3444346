"""Infrastructure providers."""

# Import bases
from .mailer import MailerProvider
from .persistence import PersistenceProvider
from .storage import StorageProvider

# Import implementations (needed for __subclasses__())
from .mailer import ProdMailerProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "MailerProvider",
    "PersistenceProvider",
    "ProdMailerProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "StorageProvider",
]
