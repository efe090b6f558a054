from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .cli.console import ClickConsole
from .cli.session import ConsoleSession
from .common.web import register_error_handlers
from .container import Container, build_container
from .reports.controller import register as register_reports
from .requests.controller import register as register_requests
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def _load_settings(settings_module: Optional[str]):
    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.debug("settings=%s", settings_module)
    return settings


def create_app(settings_module: Optional[str] = None) -> Flask:
    settings = _load_settings(settings_module)

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    app_config = dict(getattr(settings, "APP_CONFIG", {}))
    container = build_container(app_config=app_config)
    app.extensions["smart_leave"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_requests(app, container)
    register_reports(app, container)

    @app.cli.command("console")
    def console_command():
        """Run the interactive leave management console."""
        ConsoleSession(container, ClickConsole()).run()

    return app


def get_container(app: Flask) -> Container:
    return app.extensions["smart_leave"]


def run_console(settings_module: Optional[str] = None) -> None:
    settings = _load_settings(settings_module)
    container = build_container(app_config=dict(getattr(settings, "APP_CONFIG", {})))
    ConsoleSession(container, ClickConsole()).run()


if __name__ == "__main__":
    run_console()
