import logging
import webbrowser

logger = logging.getLogger(__name__)


class LaunchError(RuntimeError):
    pass


def open_store_link(url: str) -> None:
    logger.debug("Opening store link %s", url)
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as exc:
        raise LaunchError(f"Could not launch {url}: {exc}") from exc
    if not opened:
        raise LaunchError(f"Could not launch {url}")
