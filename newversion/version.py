from __future__ import annotations

from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, metadata, version


DEFAULT_VERSION = "0.1.0"


class LocalVersionError(LookupError):
    pass


@dataclass(frozen=True)
class PackageInfo:
    app_id: str
    version: str


def get_app_version() -> str:
    try:
        return version("newversion")
    except PackageNotFoundError:
        return DEFAULT_VERSION


def get_package_info(distribution: str) -> PackageInfo:
    """Version and identifier of an installed distribution."""
    try:
        meta = metadata(distribution)
    except PackageNotFoundError as exc:
        raise LocalVersionError(f"Distribution is not installed: {distribution}") from exc
    return PackageInfo(app_id=meta["Name"] or distribution, version=meta["Version"])
