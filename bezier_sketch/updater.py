import logging
import re
from typing import Optional, Tuple

import requests
from PySide6.QtCore import QObject, QUrl, Signal
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QMessageBox

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10


def parse_version(text: str) -> Tuple[int, ...]:
    """Turns 'v1.2.10' into (1, 2, 10) so versions compare numerically."""
    return tuple(int(part) for part in re.findall(r"\d+", text))


class UpdateWorker(QObject):
    """Performs the release check in a background thread."""
    update_found = Signal(dict)
    error_occurred = Signal(str)
    finished = Signal()

    def __init__(self, current_version: str, url: str):
        super().__init__()
        self.current_version = current_version
        self.url = url

    def run(self):
        """Fetches the latest release description and compares versions."""
        try:
            response = requests.get(self.url, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
            latest_release = response.json()
            latest_version = latest_release["tag_name"].lstrip('v')

            if parse_version(latest_version) > parse_version(self.current_version):
                logger.info("New version available: %s", latest_version)
                self.update_found.emit(latest_release)
            else:
                logger.debug("Up to date (%s).", self.current_version)

        except requests.RequestException as e:
            logger.warning("Update check failed: %s", e)
            self.error_occurred.emit(f"Update check failed: {e}")
        except (KeyError, ValueError) as e:
            logger.warning("Malformed release data from %s: %s", self.url, e)
            self.error_occurred.emit(f"Update check failed: malformed release data ({e})")
        finally:
            self.finished.emit()


def show_update_dialog(release_info: dict, parent) -> Optional[bool]:
    """
    Tells the user a new version exists and offers to open its release page.
    Must be called from the main GUI thread.
    """
    latest_version = release_info["tag_name"]
    release_notes = release_info.get("body") or ""
    release_page = release_info.get("html_url")

    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Icon.Information)
    msg_box.setWindowTitle("Update Available")
    msg_box.setText(f"A new version ({latest_version}) is available!")
    msg_box.setInformativeText(f"\nRelease Notes:\n{release_notes}")

    if not release_page:
        msg_box.exec()
        return None

    msg_box.setText(f"A new version ({latest_version}) is available! Open the download page?")
    msg_box.setStandardButtons(
        QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No)
    msg_box.setDefaultButton(QMessageBox.StandardButton.Yes)

    if msg_box.exec() == QMessageBox.StandardButton.Yes:
        return QDesktopServices.openUrl(QUrl(release_page))
    return False
