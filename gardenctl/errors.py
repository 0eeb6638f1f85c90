"""Error types raised by the gardenctl core."""


class GardenctlError(Exception):
    """Base class for all gardenctl errors."""
    pass


# Raised while loading the configuration
class StorageOpenError(GardenctlError):
    pass


class DecodeError(GardenctlError):
    pass


class PathResolutionError(GardenctlError):
    pass


# Raised while saving the configuration
class EncodeError(GardenctlError):
    pass


class StorageWriteError(GardenctlError):
    pass


class PatternCompileError(GardenctlError):
    """A configured match pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"failed to compile configured regular expression {pattern!r}: {reason}")


class NoMatchError(GardenctlError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"the provided value {value!r} does not match any pattern")


class DuplicateNameError(GardenctlError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"could not add Garden: Garden with name {name!r} already exists in config")


class NotFoundError(GardenctlError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"garden with name or alias {name!r} is not defined in gardenctl configuration")


class ValidationError(GardenctlError):
    pass


# Raised by the kube helpers used from the CLI
class KubeconfigError(GardenctlError):
    pass


class ClusterConfigError(GardenctlError):
    pass
