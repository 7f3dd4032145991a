"""Exception definitions for bundle-tool"""

from ..constants import ErrorCode


class BundleToolError(Exception):
    """Base exception for bundle-tool"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class MissingRequiredFileError(BundleToolError):
    """One or more required entry files are missing"""

    def __init__(self, missing):
        self.missing = list(missing)
        names = ", ".join(str(path) for path in self.missing)
        super().__init__(f"Missing required files: {names}", ErrorCode.MISSING_REQUIRED_FILE)


class BuildError(BundleToolError):
    """Build operation error"""
    pass


class BundlerError(BuildError):
    """The bundler could not run or did not report a compilation"""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message, ErrorCode.BUNDLER_FAILED)
        self.cause = cause


class CompileError(BuildError):
    """The bundler reported compile errors"""

    def __init__(self, count: int):
        super().__init__(f"Compilation failed with {count} error(s)", ErrorCode.COMPILE_FAILED)
        self.count = count


class WarningsAsErrorsError(BuildError):
    """Compile warnings escalated to failures in a CI environment"""

    def __init__(self, count: int):
        super().__init__(
            f"Compilation reported {count} warning(s) in CI mode",
            ErrorCode.WARNINGS_AS_ERRORS
        )
        self.count = count


class ConfigError(BundleToolError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)
