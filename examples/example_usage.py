"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib
from pathlib import Path

from config import get_settings_module

from src.worklog_portal.worklog_portal.container import build_container
from src.worklog_portal.worklog_portal.storage.json_file_store import JsonFileStore


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(store=JsonFileStore(Path(settings.DATA_DIR)))
    print(container.timesheet_service.status(employee="bhargav", work_date=None).to_dict())
    print([b.to_dict() for b in container.leave_service.list_balances()])


if __name__ == "__main__":
    main()
