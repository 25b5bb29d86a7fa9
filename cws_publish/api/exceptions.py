"""Exception definitions for cws-publish"""

from typing import Optional

from ..constants import ErrorCode


class CwsPublishError(Exception):
    """Base exception for cws-publish"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigurationError(CwsPublishError):
    """Missing or malformed configuration value"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_INVALID)


class InvalidFileTypeError(CwsPublishError):
    """Archive content type is not allowed"""

    def __init__(self, content_type: str):
        message = f"Zip file is invalid: detected content type {content_type!r}"
        super().__init__(message, ErrorCode.INVALID_FILE_TYPE)
        self.content_type = content_type


class InvalidPublishTargetError(CwsPublishError):
    """Publish target is not one of the supported values"""

    def __init__(self, target: str):
        message = f"Publish target is invalid: {target!r}"
        super().__init__(message, ErrorCode.INVALID_PUBLISH_TARGET)
        self.target = target


class DirectoryNotFoundError(CwsPublishError):
    """Directory does not exist or is not a directory"""

    def __init__(self, path: str, label: str = "Directory"):
        message = f"{label} directory does not exist: {path}"
        super().__init__(message, ErrorCode.DIRECTORY_NOT_FOUND)
        self.path = path


class HTTPError(CwsPublishError):
    """Transport failure or unexpected status code"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, ErrorCode.HTTP_FAILED)
        self.status_code = status_code


class DecodeError(CwsPublishError):
    """Malformed JSON or YAML content"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.DECODE_FAILED)


class FileIOError(CwsPublishError):
    """File open, read, write or copy failure"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.FILE_IO_FAILED)


class TokenError(CwsPublishError):
    """Access token refresh failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.TOKEN_FAILED)


class UploadError(CwsPublishError):
    """Archive upload failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.UPLOAD_FAILED)


class PublishError(CwsPublishError):
    """Publish request failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.PUBLISH_FAILED)


class ResolverError(CwsPublishError):
    """Store config resolution failed"""

    def __init__(self, message: str, error_code: str = ErrorCode.RESOLVE_FAILED):
        super().__init__(message, error_code)


class NoManifestsFoundError(ResolverError):
    """No manifest files under the source directory"""

    def __init__(self, src_dir: str):
        message = f"There are no store configs at source directory: {src_dir}"
        super().__init__(message, ErrorCode.NO_MANIFESTS)
        self.src_dir = src_dir
