class PictureFrameError(Exception):
    """Base class for failures raised by the picture frame pipeline."""


class ConfigurationError(PictureFrameError):
    """A named setting is missing, empty or malformed."""


class SecretResolutionError(PictureFrameError):
    """A Key Vault secret reference could not be resolved."""


class ImageGenerationError(PictureFrameError):
    """The generation API returned no usable image payload."""


class ImageProcessingError(PictureFrameError):
    """Compression or resizing of an image failed."""


class EmailDeliveryError(PictureFrameError):
    """The email send operation finished in a non-success state."""
