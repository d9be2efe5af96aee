from azure.storage.blob import BlobServiceClient, ContentSettings

from .config import Config
from .logger import PipelineLogger
from .models import GeneratedImage, PictureFrameConfiguration


class StorageUploader:
    """Uploads raw generated images to the blob container."""

    def __init__(
        self,
        config: Config,
        logger: PipelineLogger,
        configuration: PictureFrameConfiguration,
        credential=None,
        container_client=None,
    ):
        self.config = config
        self.logger = logger
        self.container_name = configuration.storage_container

        if container_client is None:
            blob_service = BlobServiceClient(configuration.storage_account_url, credential=credential)
            container_client = blob_service.get_container_client(self.container_name)
        self.container_client = container_client

    def upload_image(self, image: GeneratedImage, metadata: dict = None) -> str:
        """Upload the decoded raw image under its generated name and return the blob name."""
        data = image.raw_bytes
        self.logger.info(f"Uploading {image.name} ({len(data)} bytes) to {self.container_name}")

        try:
            blob_client = self.container_client.get_blob_client(image.name)
            blob_client.upload_blob(
                data,
                metadata=metadata,
                content_settings=ContentSettings(content_type=self.config.ATTACHMENT_CONTENT_TYPE),
            )
        except Exception as e:
            self.logger.error(f"Failed to upload {image.name}: {e}")
            raise

        self.logger.info(f"Uploaded {image.name} to {self.container_name}")
        return image.name
