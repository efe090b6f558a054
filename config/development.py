import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

APP_CONFIG = {
    "leaves_per_year": int(os.getenv("LEAVES_PER_YEAR", "30")),
    "request_id_base": int(os.getenv("REQUEST_ID_BASE", "1000")),
    # Demo employee/manager/admin accounts plus one approved request
    "seed_demo_data": bool(int(os.getenv("SEED_DEMO_DATA", "1"))),
    "export_dir": os.getenv("EXPORT_DIR", "exports"),
}

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
