import logging

import flet as ft

from gpacalc.config.log_config import configure_logging
from gpacalc.config.settings import settings
from gpacalc.services.course_store import CourseStore
from gpacalc.services.storage import Storage
from gpacalc.ui.app import GpaCalculatorApp

logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    storage = Storage(settings.db_path)
    store = CourseStore(storage, settings.storage_key, strict=settings.strict_load)
    GpaCalculatorApp(page, store).run()


def run() -> None:
    configure_logging(settings.log_level)
    logger.info("starting GPA calculator (db=%s, web=%s)", settings.db_path, settings.web_mode)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
