from newversion.services.catalogs import CatalogRecord, FetchError, FetchErrorKind, MarkupSelectors
from newversion.services.dialog import Design, DialogConfig, DialogPresenter
from newversion.services.launcher import LaunchError, open_store_link
from newversion.services.resolver import Platform, ResolverConfig, VersionResolver, VersionStatus
from newversion.services.versioning import Ordering, VersionNumber, VersionParseError, compare, compare_strings
from newversion.version import get_app_version

__version__ = get_app_version()

__all__ = [
    "CatalogRecord",
    "Design",
    "DialogConfig",
    "DialogPresenter",
    "FetchError",
    "FetchErrorKind",
    "LaunchError",
    "MarkupSelectors",
    "Ordering",
    "Platform",
    "ResolverConfig",
    "VersionNumber",
    "VersionParseError",
    "VersionResolver",
    "VersionStatus",
    "compare",
    "compare_strings",
    "get_app_version",
    "open_store_link",
]
