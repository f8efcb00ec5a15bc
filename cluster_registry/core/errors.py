"""
Exceptions raised by the cluster registry
"""


class RegistryError(Exception):
    """Base class for registry errors"""


class SettingsError(RegistryError):
    """A configuration value cannot be used"""


class IllegalStateError(RegistryError):
    """An operation was called in a state that does not allow it"""
