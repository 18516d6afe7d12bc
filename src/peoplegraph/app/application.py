from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import sys
import os

ORG_ID = "peoplegraph"
APP_ID = "peoplegraph"
ORG_DOMAIN = "peoplegraph.local"

VISIBLE_APP_NAME = "People Graph"


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
