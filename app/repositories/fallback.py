"""Degraded-mode catalog: answer from built-in data when the remote store fails."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

import sentry_sdk
import structlog

from app.core.exceptions import InfrastructureError
from app.repositories.interfaces import CatalogRepository, EquipmentRecord
from app.repositories.memory import InMemoryCatalogRepository

T = TypeVar("T")

logger = structlog.get_logger(__name__)


class FallbackCatalogRepository(CatalogRepository):
    """Wraps a primary catalog and falls back to a secondary one on failure.

    Only ``InfrastructureError`` triggers the fallback. Every fallback is
    logged at warning level and reported to Sentry.
    """

    def __init__(
        self,
        primary: CatalogRepository,
        fallback: CatalogRepository | None = None,
    ) -> None:
        self._primary = primary
        self._fallback = fallback or InMemoryCatalogRepository()

    async def _call(
        self,
        operation: str,
        primary: Callable[[], Awaitable[T]],
        fallback: Callable[[], Awaitable[T]],
    ) -> T:
        try:
            return await primary()
        except InfrastructureError as exc:
            logger.warning("catalog_fallback_used", operation=operation, error=str(exc))
            try:
                sentry_sdk.capture_exception(exc)
            except Exception:
                # Never let Sentry instrumentation break the degraded path
                pass
            return await fallback()

    async def list_all(self) -> list[EquipmentRecord]:
        return await self._call("list_all", self._primary.list_all, self._fallback.list_all)

    async def get(self, equipment_id: str) -> EquipmentRecord | None:
        return await self._call(
            "get",
            lambda: self._primary.get(equipment_id),
            lambda: self._fallback.get(equipment_id),
        )

    async def list_by_category(self, category: str) -> list[EquipmentRecord]:
        return await self._call(
            "list_by_category",
            lambda: self._primary.list_by_category(category),
            lambda: self._fallback.list_by_category(category),
        )

    async def list_featured(self) -> list[EquipmentRecord]:
        return await self._call(
            "list_featured", self._primary.list_featured, self._fallback.list_featured
        )
