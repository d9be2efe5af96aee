import base64
import io

from PIL import Image, ImageOps

from .config import Config
from .errors import ImageProcessingError
from .logger import PipelineLogger
from .models import GeneratedImage


def _open_image(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


def _to_truecolor(img: Image.Image) -> Image.Image:
    """Expand palette/greyscale images, keeping alpha when present."""
    has_alpha = "A" in img.getbands() or "transparency" in img.info
    target = "RGBA" if has_alpha else "RGB"
    if img.mode != target:
        img = img.convert(target)
    return img


class ImageCompressor:
    """Recompresses PNGs as optimized palette images."""

    def __init__(self, config: Config, logger: PipelineLogger):
        self.config = config
        self.logger = logger

    def compress_image(self, image: GeneratedImage) -> GeneratedImage:
        """Compress the raw payload and store it on the image as compressed_base64."""
        self.logger.info(f"Compressing {image.name}")

        try:
            compressed = self.compress_bytes(base64.b64decode(image.base64))
        except Exception as e:
            self.logger.error(f"Failed to compress {image.name}: {e}")
            raise ImageProcessingError(f"Compression failed for {image.name}: {e}") from e

        image.compressed_base64 = base64.b64encode(compressed).decode("ascii")
        return image

    def compress_bytes(self, data: bytes, colors: int = None, compress_level: int = None) -> bytes:
        """Quantize to a palette and save with PNG optimization. Dimensions are unchanged."""
        if colors is None:
            colors = self.config.PNG_QUANTIZE_COLORS
        if compress_level is None:
            compress_level = self.config.PNG_COMPRESS_LEVEL

        img = _to_truecolor(_open_image(data))

        # Median cut only supports RGB; octree handles the alpha channel
        if img.mode == "RGBA":
            quantized = img.quantize(colors=colors, method=Image.Quantize.FASTOCTREE)
        else:
            quantized = img.quantize(colors=colors, method=Image.Quantize.MEDIANCUT)

        buf = io.BytesIO()
        quantized.save(buf, format="PNG", optimize=True, compress_level=compress_level)
        output = buf.getvalue()

        self.logger.debug(
            f"Compressed {img.size[0]}x{img.size[1]} image from {len(data)} to {len(output)} bytes"
        )
        return output


class ImageResizer:
    """Fits compressed images to the frame's display resolution."""

    def __init__(self, config: Config, logger: PipelineLogger):
        self.config = config
        self.logger = logger

    def resize_image(self, image: GeneratedImage) -> GeneratedImage:
        """Resize the compressed payload and store it on the image as resized_base64."""
        if not image.compressed_base64:
            raise ImageProcessingError(f"{image.name} has not been compressed")

        self.logger.info(f"Resizing {image.name} to {self.config.FRAME_SIZE[0]}x{self.config.FRAME_SIZE[1]}")

        try:
            resized = self.resize_bytes(base64.b64decode(image.compressed_base64))
        except Exception as e:
            self.logger.error(f"Failed to resize {image.name}: {e}")
            raise ImageProcessingError(f"Resize failed for {image.name}: {e}") from e

        image.resized_base64 = base64.b64encode(resized).decode("ascii")
        return image

    def resize_bytes(self, data: bytes, size: tuple = None) -> bytes:
        """Scale to cover the target size and crop from the center."""
        if size is None:
            size = self.config.FRAME_SIZE

        img = _to_truecolor(_open_image(data))
        self.logger.debug(f"Input size for resize: {img.size[0]}x{img.size[1]}")

        fitted = ImageOps.fit(img, size, method=Image.LANCZOS)

        buf = io.BytesIO()
        fitted.save(buf, format="PNG")
        return buf.getvalue()
