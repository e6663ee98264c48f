APP_NAME = "cardo"
VERSION = "0.1.0"

MANIFEST_FILENAME = "markdown.toml"
DEFAULT_OUTPUT_DIR = "markdowns"

DEFAULT_REF = "main"
DEFAULT_FILE_NAME = "file.md"
GITHUB_RAW_BASE_URL = "https://raw.githubusercontent.com"

DEFAULT_MAX_RETRIES = 3
DEFAULT_TIMEOUT_SECONDS = 30.0
