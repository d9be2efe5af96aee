from azure.communication.email import EmailClient

from .config import Config
from .errors import EmailDeliveryError
from .logger import PipelineLogger
from .models import PictureFrameConfiguration


class EmailDispatcher:
    """Sends processed images to the picture frame's mailbox."""

    SUCCEEDED = "Succeeded"

    def __init__(
        self,
        config: Config,
        logger: PipelineLogger,
        configuration: PictureFrameConfiguration,
        client: EmailClient = None,
    ):
        self.config = config
        self.logger = logger
        self.configuration = configuration
        self.client = client or EmailClient.from_connection_string(
            configuration.communication_service_connection_string
        )

    def build_message(self, images: list) -> dict:
        """Build the send payload with one PNG attachment per image."""
        return {
            "senderAddress": self.configuration.sender_email_address,
            "recipients": {
                "to": [
                    {
                        "address": self.configuration.picture_frame_email_address,
                        "displayName": self.config.RECIPIENT_DISPLAY_NAME,
                    }
                ]
            },
            "content": {
                "subject": self.config.EMAIL_SUBJECT,
                "plainText": self.config.EMAIL_BODY,
            },
            "attachments": [
                {
                    "name": image.name,
                    "contentType": self.config.ATTACHMENT_CONTENT_TYPE,
                    "contentInBase64": image.final_base64,
                }
                for image in images
            ],
        }

    def send_images(self, images: list) -> dict:
        """Submit the email and block until the send operation is terminal."""
        message = self.build_message(images)
        names = ", ".join(image.name for image in images)
        self.logger.info(f"Emailing {names} to {self.configuration.picture_frame_email_address}")

        try:
            poller = self.client.begin_send(message)
            result = poller.result()
        except Exception as e:
            self.logger.error(f"Failed to send email for {names}: {e}")
            raise

        status = (result or {}).get("status")
        if status != self.SUCCEEDED:
            error = (result or {}).get("error")
            self.logger.error(f"Email send for {names} finished with status {status}: {error}")
            raise EmailDeliveryError(f"Email send finished with status {status}")

        self.logger.info(f"Email sent for {names} (operation {result.get('id')})")
        return result
