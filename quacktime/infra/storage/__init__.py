"""Local storage infrastructure module"""
from .client import (
    CorruptStoreError,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    MirroredKeyValueStore,
    StorageError,
    create_key_value_store,
)

__all__ = [
    'CorruptStoreError',
    'InMemoryKeyValueStore',
    'JsonFileKeyValueStore',
    'KeyValueStore',
    'MirroredKeyValueStore',
    'StorageError',
    'create_key_value_store',
]
