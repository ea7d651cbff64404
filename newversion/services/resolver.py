from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from newversion.config import Settings, get_settings
from newversion.services.catalogs import (
    DEFAULT_SELECTORS,
    CatalogRecord,
    FetchError,
    MarkupCatalogClient,
    MarkupSelectors,
    StructuredCatalogClient,
)
from newversion.services.dialog import DialogConfig, DialogPresenter
from newversion.services.status_types import Platform, VersionStatus
from newversion.version import get_package_info

logger = logging.getLogger(__name__)

__all__ = ["Platform", "ResolverConfig", "VersionResolver", "VersionStatus"]


@dataclass(frozen=True)
class ResolverConfig:
    app_store_id: str | None = None
    play_store_id: str | None = None
    app_store_country: str | None = None


class VersionResolver:
    """Looks up the store version of an app and compares it to the local one.

    Every call is a single request with no retry or caching. Catalog
    failures are logged and turn into ``None``; they never produce a
    partially filled ``VersionStatus``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
        selectors: MarkupSelectors = DEFAULT_SELECTORS,
    ):
        self.client = client
        self.settings = settings or get_settings()
        self.selectors = selectors

    def structured_client(self) -> StructuredCatalogClient:
        return StructuredCatalogClient(client=self.client, settings=self.settings)

    def markup_client(self) -> MarkupCatalogClient:
        return MarkupCatalogClient(client=self.client, settings=self.settings, selectors=self.selectors)

    async def resolve(
        self,
        platform: Platform,
        local_version: str,
        local_app_id: str,
        config: ResolverConfig | None = None,
    ) -> VersionStatus | None:
        config = config or ResolverConfig()
        try:
            record = await self._fetch_record(platform, local_app_id, config)
        except FetchError as exc:
            logger.warning("Version lookup failed (%s): %s", exc.kind.value, exc)
            return None
        if record is None:
            return None

        logger.debug("Store record for %s: %s", local_app_id, record)
        return VersionStatus(
            local_version=local_version,
            store_version=record.version,
            app_store_link=record.canonical_link,
            release_notes=record.release_notes,
        )

    async def _fetch_record(
        self,
        platform: Platform,
        local_app_id: str,
        config: ResolverConfig,
    ) -> CatalogRecord | None:
        if platform is Platform.IOS:
            app_id = config.app_store_id or local_app_id
            return await self.structured_client().fetch(app_id, config.app_store_country)
        if platform is Platform.ANDROID:
            app_id = config.play_store_id or local_app_id
            return await self.markup_client().fetch(app_id)
        logger.warning('The target platform "%s" is not yet supported.', platform.value)
        return None

    async def resolve_installed(
        self,
        platform: Platform,
        distribution: str,
        config: ResolverConfig | None = None,
    ) -> VersionStatus | None:
        info = get_package_info(distribution)
        return await self.resolve(platform, info.version, info.app_id, config)

    def decide_and_present(
        self,
        status: VersionStatus,
        presenter: DialogPresenter,
        dialog_config: DialogConfig | None = None,
    ) -> bool:
        if not status.can_update:
            return False
        presenter.present(status, dialog_config or DialogConfig())
        return True

    async def show_alert_if_necessary(
        self,
        platform: Platform,
        local_version: str,
        local_app_id: str,
        presenter: DialogPresenter,
        config: ResolverConfig | None = None,
        dialog_config: DialogConfig | None = None,
    ) -> bool:
        status = await self.resolve(platform, local_version, local_app_id, config)
        if status is None:
            return False
        return self.decide_and_present(status, presenter, dialog_config)
