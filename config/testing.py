import os

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("DATA_DIR", "data-test")

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "0")))
