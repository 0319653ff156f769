"""Base repository with common key-value operations"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..client import KeyValueStore, StorageError

T = TypeVar('T', bound=BaseModel)


class BaseRepository(Generic[T]):
    """
    Base repository storing pydantic models as JSON blobs under a key.
    Hides the key-value store from the rest of the application.
    """

    def __init__(self, store: KeyValueStore, key: str, model_class: Type[T]):
        self._store = store
        self._key = key
        self._model_class = model_class

    @property
    def key(self) -> str:
        return self._key

    def _to_model(self, data: Dict[str, Any]) -> T:
        """Convert stored dict to domain model"""
        try:
            return self._model_class.model_validate(data)
        except ValidationError as e:
            raise StorageError(f"Invalid {self._model_class.__name__} under {self._key}: {e}") from e

    def _to_models(self, data: List[Dict[str, Any]]) -> List[T]:
        """Convert list of stored dicts to domain models"""
        return [self._to_model(item) for item in data]

    def _to_data(self, model: T) -> Dict[str, Any]:
        return model.model_dump(mode='json', by_alias=True)

    def find(self, key: Optional[str] = None) -> Optional[T]:
        """Load the single model stored under the key"""
        data = self._store.get(key or self._key)

        if data is None:
            return None
        if not isinstance(data, dict):
            raise StorageError(f"Expected an object under {key or self._key}")

        return self._to_model(data)

    def find_all(self, key: Optional[str] = None) -> List[T]:
        """Load the list of models stored under the key"""
        data = self._store.get(key or self._key)

        if data is None:
            return []
        if not isinstance(data, list):
            raise StorageError(f"Expected a list under {key or self._key}")

        return self._to_models(data)

    def save(self, model: T, key: Optional[str] = None) -> None:
        """Replace the model stored under the key"""
        self._store.set(key or self._key, self._to_data(model))

    def save_all(self, models: List[T], key: Optional[str] = None) -> None:
        """Replace the list stored under the key"""
        self._store.set(key or self._key, [self._to_data(m) for m in models])

    def delete(self, key: Optional[str] = None) -> None:
        """Remove the key"""
        self._store.remove(key or self._key)
