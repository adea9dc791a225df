"""Registry text source integration."""

from emojidb.integrations.registry_source.abc import RegistrySource
from emojidb.integrations.registry_source.fake import FakeRegistrySource
from emojidb.integrations.registry_source.real import LocalRegistrySource, RemoteRegistrySource

__all__ = [
    "RegistrySource",
    "FakeRegistrySource",
    "LocalRegistrySource",
    "RemoteRegistrySource",
]
