from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import build_container
from .leave.controller import register as register_leave
from .matrices.controller import register as register_matrices
from .projects.controller import register as register_projects
from .settings.controller import register as register_settings
from .storage.bootstrap import initialize_collections
from .storage.json_file_store import JsonFileStore
from .storage.store import DocumentStore
from .timesheets.controller import register as register_timesheets
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(store: Optional[DocumentStore] = None) -> Flask:
    """Build the Flask app.

    ``store`` replaces the JSON file store (tests pass an InMemoryStore).
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DATA_DIR"] = str(getattr(settings, "DATA_DIR", "data"))
    app.json.sort_keys = False

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if store is None:
        store = JsonFileStore(Path(app.config["DATA_DIR"]))
        logger.info("settings=%s data_dir=%s", settings_module, Path(app.config["DATA_DIR"]).resolve())

    if bool(getattr(settings, "AUTO_SEED_DATA", False)):
        initialize_collections(store)

    container = build_container(store=store)
    app.extensions["worklog_container"] = container

    register_users(app, container)
    register_projects(app, container)
    register_timesheets(app, container)
    register_leave(app, container)
    register_matrices(app, container)
    register_settings(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app
