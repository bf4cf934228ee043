"""Custom exceptions for the AAR/JAR repackager."""


class RepackagerError(Exception):
    """Base exception for the AAR/JAR repackager."""


class InvalidArgumentsError(RepackagerError):
    """Raised when the supplied coordinates or paths are missing or malformed."""


class UnsupportedInputKindError(RepackagerError):
    """Raised when the input file is neither an AAR nor a JAR."""


class RepackageIOError(RepackagerError):
    """Raised when copying, hashing, writing or archiving a file fails."""


class ResourceMissingError(RepackagerError):
    """Raised when a bundled template cannot be found."""
