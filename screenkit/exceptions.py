"""
Exceptions raised by ScreenKit while composing and rendering screens.
"""


class ScreenKitError(Exception):
    """Base class for all ScreenKit errors."""


class FieldRequiredAttributeError(ScreenKitError):
    """A field was rendered without one of its mandatory attributes."""

    def __init__(self, attribute: str, field=None):
        self.attribute = attribute
        self.field = field
        name = type(field).__name__ if field is not None else 'Field'
        super().__init__(f"Field {name} must have the '{attribute}' attribute set")


class LayoutResolutionError(ScreenKitError):
    """A layout declaration could not be turned into a layout instance."""


class DecryptError(ScreenKitError):
    """The payload could not be decrypted with the configured key."""
