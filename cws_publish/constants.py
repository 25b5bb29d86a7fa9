"""Global constants for cws-publish"""

from enum import Enum

APP_NAME = "cws-publish"

# Chrome Web Store API
ROOT_URI = "https://www.googleapis.com"
REFRESH_TOKEN_URI = "https://www.googleapis.com/oauth2/v4/token"
UPLOAD_PATH_PATTERN = "/upload/chromewebstore/v1.1/items/{extension_id}"
PUBLISH_PATH_PATTERN = "/chromewebstore/v1.1/items/{extension_id}/publish"
UPLOAD_FIELD_NAME = "file"
UPLOAD_PART_CONTENT_TYPE = "application/octet-stream"
DEFAULT_HTTP_TIMEOUT = 120.0  # seconds


class PublishTarget(Enum):
    DEFAULT = "default"
    TRUSTED_TESTERS = "trustedTesters"


PUBLISH_TARGETS = [target.value for target in PublishTarget]
DEFAULT_PUBLISH_TARGET = PublishTarget.DEFAULT.value

# Archive validation
SNIFF_LENGTH = 512  # bytes inspected for content-type detection
ALLOWED_FILE_TYPES = ["application/zip"]

# Store config layout
MANIFEST_FILE_NAME = "manifest.json"
MANIFEST_GLOB = f"*/{MANIFEST_FILE_NAME}"
DESKTOP_RULESET_MARKER = "desktop"
RULESET_PROVIDER_KEY = "loadExternalProvider"
PROVIDER_FILE_PATTERN = "{provider}.js"

# Configuration keys
CONFIG_FILE_NAME = f".{APP_NAME}.yaml"
EXTENSION_ID_KEY = "extension.id"
CLIENT_ID_KEY = "google.client.id"
CLIENT_SECRET_KEY = "google.client.secret"
REFRESH_TOKEN_KEY = "google.refresh.token"
ZIP_PATH_KEY = "zipPath"
SRC_KEY = "src"
DEST_KEY = "dest"
LOG_LEVEL_KEY = "log.level"
LOG_TIMESTAMP_KEY = "log.timestamp"

REQUIRED_UPLOAD_KEYS = [
    EXTENSION_ID_KEY,
    CLIENT_ID_KEY,
    CLIENT_SECRET_KEY,
    REFRESH_TOKEN_KEY,
]

# Logging
DEFAULT_LOG_LEVEL = "info"
LOG_FORMAT = "%(message)s"


# Error codes
class ErrorCode:
    CONFIG_INVALID = "CWS001"
    INVALID_FILE_TYPE = "CWS002"
    INVALID_PUBLISH_TARGET = "CWS003"
    DIRECTORY_NOT_FOUND = "CWS004"
    HTTP_FAILED = "CWS005"
    DECODE_FAILED = "CWS006"
    FILE_IO_FAILED = "CWS007"
    TOKEN_FAILED = "CWS008"
    UPLOAD_FAILED = "CWS009"
    PUBLISH_FAILED = "CWS010"
    RESOLVE_FAILED = "CWS011"
    NO_MANIFESTS = "CWS012"

