from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

import httpx
from bs4 import BeautifulSoup, Tag

from newversion.config import Settings, get_settings

logger = logging.getLogger(__name__)


class FetchErrorKind(Enum):
    HTTP_STATUS = "http_status"
    NOT_FOUND = "not_found"
    MALFORMED_RESPONSE = "malformed_response"
    VERSION_NOT_FOUND = "version_not_found"
    TRANSPORT = "transport"


class FetchError(RuntimeError):
    def __init__(
        self,
        kind: FetchErrorKind,
        message: str,
        url: str = "",
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.url = url
        self.status_code = status_code


@dataclass(frozen=True)
class CatalogRecord:
    version: str
    canonical_link: str
    release_notes: str | None = None


@dataclass(frozen=True)
class MarkupSelectors:
    """Class names and labels used to read a Play Store details page.

    The provider changes its markup without notice; update these values
    rather than the traversal in ``MarkupCatalogClient``.
    """

    info_row_class: str = "hAyfc"
    info_label: str = ".BgcNfc"
    info_value: str = ".htlgb"
    current_version_label: str = "Current Version"
    section_class: str = "W4P4ne"
    section_heading: str = ".wSaTQd"
    whats_new_heading: str = "What's New"
    notes_container: str = ".PHBdkd"
    notes_text: str = ".DWPxHb"


DEFAULT_SELECTORS = MarkupSelectors()


class CatalogClient:
    name: str

    def __init__(self, client: httpx.AsyncClient | None = None, settings: Settings | None = None):
        self.client = client
        self.settings = settings or get_settings()

    async def _get(self, url: httpx.URL) -> httpx.Response:
        headers = {"User-Agent": self.settings.user_agent}
        try:
            if self.client is not None:
                response = await self.client.get(url, headers=headers)
            else:
                async with httpx.AsyncClient(
                    timeout=self.settings.http_timeout_seconds,
                    follow_redirects=True,
                ) as client:
                    response = await client.get(url, headers=headers)
        except httpx.HTTPError as exc:
            logger.debug("%s request to %s failed: %s", self.name, url, exc)
            raise FetchError(
                FetchErrorKind.TRANSPORT,
                f"{self.name} request failed: {exc}",
                url=str(url),
            ) from exc

        if not response.is_success:
            logger.debug("%s request to %s returned HTTP %s", self.name, url, response.status_code)
            raise FetchError(
                FetchErrorKind.HTTP_STATUS,
                f"{self.name} responded with HTTP {response.status_code}",
                url=str(url),
                status_code=response.status_code,
            )
        return response


class StructuredCatalogClient(CatalogClient):
    """Apple App Store, read through the iTunes lookup JSON API."""

    name = "app_store"

    def lookup_url(self, app_id: str, region_code: str | None = None) -> httpx.URL:
        params = {"bundleId": app_id}
        if region_code:
            params["country"] = region_code
        return httpx.URL(
            f"https://{self.settings.app_store_host}{self.settings.app_store_lookup_path}",
            params=params,
        )

    async def fetch(self, app_id: str, region_code: str | None = None) -> CatalogRecord:
        url = self.lookup_url(app_id, region_code)
        response = await self._get(url)

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError(
                FetchErrorKind.MALFORMED_RESPONSE,
                f"App Store lookup returned invalid JSON: {exc}",
                url=str(url),
            ) from exc

        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            raise FetchError(
                FetchErrorKind.MALFORMED_RESPONSE,
                "App Store lookup response has no results list",
                url=str(url),
            )
        if not results:
            raise FetchError(
                FetchErrorKind.NOT_FOUND,
                f"Can't find an app in the App Store with the id: {app_id}",
                url=str(url),
            )

        first = results[0]
        if not isinstance(first, dict):
            raise FetchError(
                FetchErrorKind.MALFORMED_RESPONSE,
                "App Store lookup result is not an object",
                url=str(url),
            )
        store_version = first.get("version")
        link = first.get("trackViewUrl")
        if not isinstance(store_version, str) or not store_version:
            raise FetchError(FetchErrorKind.MALFORMED_RESPONSE, "App Store result has no version", url=str(url))
        if not isinstance(link, str) or not link:
            raise FetchError(FetchErrorKind.MALFORMED_RESPONSE, "App Store result has no trackViewUrl", url=str(url))

        notes = first.get("releaseNotes")
        return CatalogRecord(
            version=store_version,
            canonical_link=link,
            release_notes=notes if isinstance(notes, str) else None,
        )


class MarkupCatalogClient(CatalogClient):
    """Google Play, read by scraping the store details page."""

    name = "play_store"

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
        selectors: MarkupSelectors = DEFAULT_SELECTORS,
    ):
        super().__init__(client=client, settings=settings)
        self.selectors = selectors

    def details_url(self, app_id: str) -> httpx.URL:
        return httpx.URL(
            f"https://{self.settings.play_store_host}{self.settings.play_store_details_path}",
            params={"id": app_id},
        )

    async def fetch(self, app_id: str) -> CatalogRecord:
        url = self.details_url(app_id)
        response = await self._get(url)
        document = BeautifulSoup(response.text, "html.parser")

        store_version = self._find_version(document)
        if store_version is None:
            raise FetchError(
                FetchErrorKind.VERSION_NOT_FOUND,
                f"No '{self.selectors.current_version_label}' row on the Play Store page for: {app_id}",
                url=str(url),
            )

        return CatalogRecord(
            version=store_version,
            canonical_link=str(url),
            release_notes=self._find_release_notes(document),
        )

    def _find_version(self, document: BeautifulSoup) -> str | None:
        sel = self.selectors
        for row in document.find_all(class_=sel.info_row_class):
            label = row.select_one(sel.info_label)
            if label is None or label.get_text(strip=True) != sel.current_version_label:
                continue
            value = row.select_one(sel.info_value)
            if value is None:
                return None
            return value.get_text(strip=True) or None
        return None

    def _find_release_notes(self, document: BeautifulSoup) -> str | None:
        sel = self.selectors
        section: Tag | None = None
        for candidate in document.find_all(class_=sel.section_class):
            heading = candidate.select_one(sel.section_heading)
            if heading is not None and heading.get_text(strip=True) == sel.whats_new_heading:
                section = candidate
                break
        if section is None:
            return None
        container = section.select_one(sel.notes_container)
        if container is None:
            return None
        notes = container.select_one(sel.notes_text)
        if notes is None:
            return None
        return notes.get_text()
