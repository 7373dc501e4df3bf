"""Custom domain exceptions for the volumes service."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
VALIDATION_ERROR = "VALIDATION_ERROR"
RESOLUTION_ERROR = "RESOLUTION_ERROR"
STORAGE_ERROR = "STORAGE_ERROR"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class DuplicateResourceError(DomainError):
    """Raised when attempting to create a resource that would violate a uniqueness constraint."""

    pass


class DomainValidationError(DomainError):
    """Raised when business rules or domain validation fail (e.g. empty names, invalid modes)."""

    pass


class ResolutionError(DomainError):
    """Raised when a referenced pool, team, provisioner or plan cannot be resolved."""

    pass


class StorageError(DomainError):
    """Raised when the database fails for a reason other than a known conflict or miss."""

    pass


class EmptyNameError(DomainValidationError):
    def __init__(self, message: str = "volume name cannot be empty"):
        super().__init__(message)


class InvalidBindModeError(DomainValidationError):
    pass


class PlanDecodeError(DomainValidationError):
    """Raised when plan options cannot be decoded into the requested shape."""

    pass


class PoolResolutionError(ResolutionError):
    pass


class TeamResolutionError(ResolutionError):
    pass


class ProvisionerResolutionError(ResolutionError):
    pass


class PlanConfigError(ResolutionError):
    """Raised when the plan configuration entry is missing or is not a mapping."""

    pass


class AlreadyBoundError(DuplicateResourceError):
    def __init__(self, message: str = "volume already bound in mountpoint"):
        super().__init__(message)


class VolumeNotFoundError(NotFoundError):
    def __init__(self, message: str = "volume not found"):
        super().__init__(message)


class BindNotFoundError(NotFoundError):
    def __init__(self, message: str = "volume bind not found"):
        super().__init__(message)
