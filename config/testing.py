import os

SECRET_KEY = "test-secret"

APP_CONFIG = {
    "leaves_per_year": 30,
    "request_id_base": 1000,
    "seed_demo_data": True,
    "export_dir": os.getenv("EXPORT_DIR", "exports"),
}

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
