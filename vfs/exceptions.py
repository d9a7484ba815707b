"""Custom exception classes for the virtual file system."""


class VFSException(Exception):
    """
    Base exception class for all VFS-related errors.
    """

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class InvalidNameError(VFSException):
    """
    Raised when a username, folder name or file name contains characters
    other than ASCII letters and digits.
    """

    def __init__(self, name: str):
        super().__init__(
            name,
            f"The name: {name} contains invalid chars. Only alphabets and numbers are allowed.",
        )


class NameTooLongError(VFSException):
    """
    Raised when a name exceeds the maximum length.
    """

    def __init__(self, name: str):
        super().__init__(name, f"The name: {name} is too long. The maximum length is 30 characters.")


class UserAlreadyExistsError(VFSException):
    """
    Raised when attempting to register a username that already exists.
    """

    def __init__(self, username: str):
        super().__init__(username, f"The user: {username} already exists.")


class UserNotFoundError(VFSException):
    def __init__(self, username: str):
        super().__init__(username, f"The user: {username} doesn't exist.")


class FolderAlreadyExistsError(VFSException):
    """
    Raised when a create or rename would collide with an existing folder.
    """

    def __init__(self, folder_name: str):
        super().__init__(folder_name, f"The folder: {folder_name} already exists.")


class FolderNotFoundError(VFSException):
    def __init__(self, folder_name: str):
        super().__init__(folder_name, f"The folder: {folder_name} doesn't exist.")


class FileAlreadyExistsError(VFSException):
    def __init__(self, file_name: str):
        super().__init__(file_name, f"The file: {file_name} already exists.")


class VirtualFileNotFoundError(VFSException):
    """
    Raised when a file record does not exist in its folder.

    Named apart from the builtin FileNotFoundError, which the stores still
    meet for missing backing files.
    """

    def __init__(self, file_name: str):
        super().__init__(file_name, f"The file: {file_name} doesn't exist.")


class NoFoldersFoundError(VFSException):
    """
    Raised when listing folders for a user that has none.
    """

    def __init__(self, username: str):
        super().__init__(username, f"The {username} doesn't have any folders.")


class StorageError(VFSException):
    """
    Raised when a backing store cannot be read, decoded or written.
    """

    def __init__(self, path: str, reason: Exception):
        super().__init__(path, f"Storage failure on {path}: {reason}")
        self.reason = reason
