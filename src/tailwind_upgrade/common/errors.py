from pathlib import Path
from typing import Optional, Union


class TailwindUpgradeError(Exception):
    code = "UNKNOWN_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.cause = cause


class PackageInstallError(TailwindUpgradeError):
    code = "PACKAGE_INSTALL_ERROR"

    def __init__(
        self,
        package: str,
        cause: Optional[BaseException] = None,
        detail: Optional[str] = None,
    ):
        self.package = package
        message = f"Failed to install package: {package}"
        if detail:
            message = f"{message}\n{detail}"
        elif cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message, cause=cause)


class FileOperationError(TailwindUpgradeError):
    code = "FILE_OPERATION_ERROR"

    def __init__(
        self,
        operation: str,
        path: Union[str, Path],
        cause: Optional[BaseException] = None,
        kind: str = "file",
    ):
        self.operation = operation
        self.path = Path(path)
        message = f"Failed to {operation} {kind}: {path}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message, cause=cause)


class ConfigurationError(TailwindUpgradeError):
    code = "CONFIGURATION_ERROR"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, cause=cause)


def wrap_error(error: BaseException) -> TailwindUpgradeError:
    if isinstance(error, TailwindUpgradeError):
        return error
    return TailwindUpgradeError(str(error) or error.__class__.__name__, cause=error)
