import os

from dotenv import dotenv_values, load_dotenv

load_dotenv()
settings = {**os.environ, **dotenv_values()}

BOOTSTRAP_VERSION = settings.get("BOOTSTRAP_VERSION", "5.3.3")
BOOTSTRAP_CDN = settings.get(
    "BOOTSTRAP_CDN", f"https://cdn.jsdelivr.net/npm/bootstrap@{BOOTSTRAP_VERSION}/dist"
)
