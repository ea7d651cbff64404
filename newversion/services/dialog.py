from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from newversion.services.status_types import Platform, VersionStatus


class Design(Enum):
    ANDROID = "android"
    IOS = "ios"
    USE_OS_STYLE = "use_os_style"


@dataclass(frozen=True)
class DialogConfig:
    title: str = "Update Available"
    text: str | None = None
    update_button_text: str = "Update now"
    dismiss_button_text: str = "Maybe Later"
    allow_dismissal: bool = True
    design: Design = Design.USE_OS_STYLE

    def body_for(self, status: VersionStatus) -> str:
        if self.text is not None:
            return self.text
        return f"You can now update this app from {status.local_version} to {status.store_version}"

    def uses_android_design(self, platform: Platform) -> bool:
        if self.design is Design.ANDROID:
            return True
        return self.design is Design.USE_OS_STYLE and platform is Platform.ANDROID


@dataclass(frozen=True)
class DialogAction:
    label: str
    callback: Callable[[], None]
    is_default: bool = False


def build_dialog_actions(
    status: VersionStatus,
    config: DialogConfig,
    open_link: Callable[[str], None],
    on_dismiss: Callable[[], None] | None = None,
    on_close: Callable[[], None] | None = None,
) -> list[DialogAction]:
    """Buttons for the update prompt, in display order.

    The dismiss button comes first and only exists when dismissal is
    allowed. The update button opens the store link and then closes the
    dialog if it can be closed at all.
    """
    actions: list[DialogAction] = []

    def update() -> None:
        open_link(status.app_store_link)
        if config.allow_dismissal and on_close is not None:
            on_close()

    if config.allow_dismissal:
        dismiss = on_dismiss or on_close or (lambda: None)
        actions.append(DialogAction(label=config.dismiss_button_text, callback=dismiss))

    actions.append(DialogAction(label=config.update_button_text, callback=update, is_default=True))
    return actions


class DialogPresenter:
    def present(self, status: VersionStatus, config: DialogConfig) -> None:
        raise NotImplementedError
