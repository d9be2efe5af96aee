from azure.identity import DefaultAzureCredential

from .config import Config
from .configuration_loading import ConfigLoader
from .email_dispatch import EmailDispatcher
from .image_generation import ImageGenerator
from .image_processing import ImageCompressor, ImageResizer
from .logger import PipelineLogger
from .models import GeneratedImage, PictureFrameConfiguration
from .storage_upload import StorageUploader


class FrameProcessor:
    """Main workflow logic for one picture frame invocation."""

    def __init__(self, config: Config = None, logger: PipelineLogger = None, credential=None):
        self.config = config or Config()
        self.logger = logger or PipelineLogger(self.config.LOG_LEVEL)
        self.credential = credential

        # Initialize components
        self.image_generator = ImageGenerator(self.config, self.logger)
        self.image_compressor = ImageCompressor(self.config, self.logger)
        self.image_resizer = ImageResizer(self.config, self.logger)

    def run(self) -> list:
        """Run the whole pipeline once. Any failure aborts the invocation."""
        invocation_id = self.logger.start_invocation()
        self.logger.info(f"ai-digital-picture-frame function running (invocation {invocation_id})...")

        try:
            # One credential shared by every Azure client in this run
            credential = self.credential or DefaultAzureCredential()

            configuration = ConfigLoader(self.config, self.logger, credential).load_configuration()
            uploader = StorageUploader(self.config, self.logger, configuration, credential=credential)
            dispatcher = EmailDispatcher(self.config, self.logger, configuration)

            images = self.image_generator.generate_images(configuration)
            for i, image in enumerate(images):
                self.logger.info(f"Processing image {i+1}/{len(images)}: {image.name}")
                self._process_single_image(image, configuration, uploader, dispatcher)

            self.logger.info("ai-digital-picture-frame function done")
            return images

        except Exception as e:
            self.logger.exception(f"Picture frame run failed: {e}")
            self.logger.info("ai-digital-picture-frame function failed, exiting")
            if self.config.RAISE_ON_FAILURE:
                raise
            return []

        finally:
            self.logger.end_invocation()

    def _process_single_image(
        self,
        image: GeneratedImage,
        configuration: PictureFrameConfiguration,
        uploader: StorageUploader,
        dispatcher: EmailDispatcher,
    ):
        """Upload, compress, resize and email a single image."""
        uploader.upload_image(image, metadata={"prompt": configuration.prompt})
        self.image_compressor.compress_image(image)

        if self.config.RESIZE_IMAGES:
            self.image_resizer.resize_image(image)
        else:
            self.logger.image_stage(image.name, "resize disabled, emailing compressed image")

        dispatcher.send_images([image])
        self.logger.image_stage(image.name, "delivered")
