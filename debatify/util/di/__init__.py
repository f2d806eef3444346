"""Dependency injection wiring."""

from debatify.util.di.application import ProdApplicationProvider
from debatify.util.di.base import Component, ProviderBase
from debatify.util.di.core import ProdConfigProvider
from debatify.util.di.domain import ProdDomainProvider
from debatify.util.di.infrastructure import (
    MailerProvider,
    PersistenceProvider,
    ProdMailerProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)

# Order is irrelevant to dishka; swappable components come last for readability
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    MailerProvider,
    StorageProvider,
]

__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "MailerProvider",
    "PersistenceProvider",
    "StorageProvider",
    "ProdMailerProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
