import os
from dotenv import load_dotenv

load_dotenv()

# Development or Production Environment
ENVIRONMENT = os.environ.get("ENVIRONMENT", "Development")

LOG_LEVEL = (os.environ.get("LOG_LEVEL") or ("DEBUG" if ENVIRONMENT == "Development" else "INFO")).upper()



# storage backend: "file", "memory" or "redis"
STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "file").lower()
STORAGE_PATH = os.environ.get("STORAGE_PATH") or ".local_storage.json"



# redis configuration
redis_host = os.environ.get('REDIS_HOST', 'localhost')
redis_port = int(os.environ.get('REDIS_PORT', 6379))  # cast to int
redis_username = os.environ.get('REDIS_USERNAME', 'default')
redis_password = os.environ.get('REDIS_PASSWORD', '')
redis_key_prefix = os.environ.get('REDIS_KEY_PREFIX', '')



# Only used to build absolute URLs for the in-process transport
LOCAL_API_BASE_URL = os.environ.get("LOCAL_API_BASE_URL", "http://local.api")



# Resume defaults
DEFAULT_TEMPLATE = "classic"
DEFAULT_ACCENT_COLOR = "#3B82F6"
UPLOAD_SUMMARY_MAX_CHARS = 600

# Largest non-file form part accepted on multipart updates (resumeData can carry an embedded photo)
FORM_MAX_PART_SIZE = int(os.environ.get("FORM_MAX_PART_SIZE", 256 * 1024 * 1024))
