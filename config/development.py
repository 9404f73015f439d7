import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# One <collection>.json per collection lives here
DATA_DIR = os.getenv("DATA_DIR", "data")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, missing collections (and the default admin/bhargav users) are created on startup
AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "1")))
