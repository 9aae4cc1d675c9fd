class PlatformsException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class UnknownPlatformError(PlatformsException, LookupError):
    """Raised when a platform id, name or tag is not in the registry."""

    kind = "key"

    def __init__(self, key):
        super().__init__(f"Unknown platform {self.kind}: {key}")
        self.key = key


class UnknownPlatformIdError(UnknownPlatformError):
    kind = "ID"


class UnknownPlatformNameError(UnknownPlatformError):
    kind = "name"


class UnknownPlatformTagError(UnknownPlatformError):
    kind = "tag"


class CLIError(PlatformsException):
    pass


class ValidationError(CLIError):
    pass
