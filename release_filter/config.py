from dotenv import load_dotenv
import os

load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Filter config file (JSON, reloaded when it changes)
FILTER_CONFIG_FILE = os.getenv(
    "RELEASE_FILTER_CONFIG_FILE",
    os.path.join(BASE_DIR, "filter_config.json"),
)

# Overrides applied on top of the built-in defaults when no config file exists
YEAR_THRESHOLD = os.getenv("RELEASE_FILTER_YEAR_THRESHOLD")
ALLOWED_TAGS = os.getenv("RELEASE_FILTER_ALLOWED_TAGS")
VERBOSE_REJECTIONS = os.getenv("RELEASE_FILTER_VERBOSE_REJECTIONS", "false").lower() in (
    "1",
    "true",
    "yes",
)

LOG_LEVEL = os.getenv("RELEASE_FILTER_LOG_LEVEL", "INFO")
