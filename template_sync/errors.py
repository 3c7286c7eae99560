class TemplateSyncError(Exception):
    """Base class for errors that abort a template sync run."""


class ConfigError(TemplateSyncError):
    """An enterprise config file exists but its content is unusable."""


class PublishError(TemplateSyncError):
    """A template could not be delivered to its enterprise endpoint."""
