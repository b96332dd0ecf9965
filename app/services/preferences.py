from __future__ import annotations

from typing import Literal, get_args

from app.core.exceptions import ValidationError
from app.repositories.interfaces import KeyValueStore

Language = Literal["english", "kannada"]
LANGUAGES: tuple[str, ...] = get_args(Language)
DEFAULT_LANGUAGE: Language = "english"


class PreferenceService:
    """Per-device display preferences kept in the key-value store."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def get_language(self, device_id: str) -> str:
        value = self._store.get(f"language:{device_id}")
        return value if value in LANGUAGES else DEFAULT_LANGUAGE

    def set_language(self, device_id: str, language: str) -> str:
        if language not in LANGUAGES:
            raise ValidationError(f"unsupported language: {language}")
        self._store.set(f"language:{device_id}", language)
        return language
