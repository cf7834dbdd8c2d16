import os
from dotenv import load_dotenv

load_dotenv()

# --------------------------------------------------
# LOGGING
# --------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# --------------------------------------------------
# INPUT LIMITS
# --------------------------------------------------

MAX_HTML_SIZE = int(os.getenv("MAX_HTML_SIZE", "5000000"))

MAX_DOCUMENTS = int(os.getenv("MAX_DOCUMENTS", "5"))

# --------------------------------------------------
# FETCHING
# --------------------------------------------------

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "20"))

FETCH_RETRIES = int(os.getenv("FETCH_RETRIES", "2"))

DYNAMIC_FETCH_ENABLED = os.getenv("DYNAMIC_FETCH_ENABLED", "true").lower() in (
    "1", "true", "yes"
)

RENDER_WAIT_SECONDS = float(os.getenv("RENDER_WAIT_SECONDS", "3"))
