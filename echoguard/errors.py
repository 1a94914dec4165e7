"""Exceptions raised across EchoGuard."""


class EchoGuardError(Exception):
    """Base class for EchoGuard errors."""


class CameraError(EchoGuardError):
    """Video source could not be opened."""


class PhrasingError(EchoGuardError):
    """Phrasing service failed or returned nothing usable."""
