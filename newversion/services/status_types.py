from dataclasses import dataclass
from enum import Enum

from newversion.services.versioning import VersionNumber


class Platform(Enum):
    IOS = "ios"
    ANDROID = "android"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class VersionStatus:
    local_version: str
    store_version: str
    app_store_link: str
    release_notes: str | None = None

    @property
    def can_update(self) -> bool:
        """True when the store version is newer than the local one."""
        return VersionNumber.parse(self.store_version) > VersionNumber.parse(self.local_version)
