from openai import OpenAI

from .config import Config
from .errors import ImageGenerationError
from .logger import PipelineLogger
from .models import GeneratedImage, PictureFrameConfiguration


class ImageGenerator:
    """Handles the OpenAI image generation call."""

    def __init__(self, config: Config, logger: PipelineLogger, client: OpenAI = None):
        self.client = client
        self.config = config
        self.logger = logger

    def generate_images(self, configuration: PictureFrameConfiguration) -> list:
        """
        Requests the configured number of images in a single call and wraps each
        base64 payload in a GeneratedImage with a fresh id.
        """
        client = self.client or OpenAI(api_key=configuration.openai_secret_key)
        params = dict(configuration.generate_params)
        params.setdefault("model", self.config.IMAGE_MODEL)

        self.logger.info(f"Generating {params.get('n')} image(s): {' '.join(configuration.prompt.split()[:10])}")

        try:
            result = client.images.generate(**params)
        except Exception as e:
            self.logger.error(f"Failed to generate images: {e}")
            raise

        images = [GeneratedImage(base64=item.b64_json) for item in (result.data or []) if item.b64_json]

        if not images:
            raise ImageGenerationError("Image generation returned no base64 payloads")

        if len(images) != params.get("n"):
            self.logger.warning(f"Requested {params.get('n')} image(s) but received {len(images)}")

        for image in images:
            self.logger.debug(f"Generated image: {image.name}")

        self.logger.info(f"Generated {len(images)} image(s)")
        return images
