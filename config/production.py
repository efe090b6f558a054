import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

APP_CONFIG = {
    "leaves_per_year": int(os.getenv("LEAVES_PER_YEAR", "30")),
    "request_id_base": int(os.getenv("REQUEST_ID_BASE", "1000")),
    "seed_demo_data": bool(int(os.getenv("SEED_DEMO_DATA", "0"))),
    "export_dir": os.getenv("EXPORT_DIR", "exports"),
}

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
