"""Global constants for bundle-tool"""

import re

APP_NAME = "bundle-tool"

# Project identification
PROJECT_CONFIG_FILE = ".bundle-tool.yaml"
PACKAGE_JSON_FILE = "package.json"
YARN_LOCK_FILE = "yarn.lock"
DOTENV_FILE = ".env"

# Default project layout
DEFAULT_PUBLIC_DIR = "public"
DEFAULT_BUILD_DIR = "build"
DEFAULT_APP_HTML = "public/index.html"
DEFAULT_APP_INDEX = "src/index.tsx"
DEFAULT_BUNDLER_CONFIG = "config/webpack.config.prod.js"
DEFAULT_BUNDLER_COMMAND = ["npx", "webpack"]

# Environment variables
ENV_NODE_ENV = "NODE_ENV"
ENV_CI = "CI"
ENV_PUBLIC_URL = "PUBLIC_URL"
NODE_ENV_PRODUCTION = "production"

# Hosting detection
GITHUB_PAGES_MARKER = ".github.io/"
GH_PAGES_PACKAGE = "gh-pages"
STATIC_SERVER_PACKAGE = "serve"

# Diagnostics
CONTEXT_LINES = 4
LINE_NUMBER_SEPARATOR = " | "
CARET_FILL = "-"
CARET = "^"

# Size reporting
SIZE_REPORT_EXTENSIONS = (".js", ".css")
FIFTY_KILOBYTES = 1024 * 50
GZIP_LEVEL = 9
# Files measured at once; bounds open file descriptors
GZIP_CONCURRENCY = 32
FILE_NAME_HASH_PATTERN = re.compile(r"^/?(.*)(\.[0-9a-f]+)(\.chunk)?(\.js|\.css)$")

# Messages
MSG_FAILED_TO_COMPILE = "Failed to compile."
MSG_WARNINGS_AS_ERRORS = (
    "Failed to compile. When process.env.CI = true, warnings are treated as "
    "failures. Most CI servers set this automatically."
)
MSG_CREATING_BUILD = "Creating an optimized production build..."
MSG_COMPILED = "Compiled successfully."

# Logging
LOG_FORMAT = "%(message)s"


class ErrorCode:
    MISSING_REQUIRED_FILE = "BT001"
    BUNDLER_FAILED = "BT002"
    COMPILE_FAILED = "BT003"
    WARNINGS_AS_ERRORS = "BT004"
    CONFIG_FORMAT_ERROR = "BT005"
