import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuration settings for the picture frame pipeline."""

    # Azure Endpoints
    APP_CONFIGURATION_ENDPOINT = os.getenv(
        "APP_CONFIGURATION_ENDPOINT", "https://app-configuration-7298.azconfig.io"
    )
    STORAGE_ACCOUNT_URL = os.getenv("STORAGE_ACCOUNT_URL", "https://storageaccount23487.blob.core.windows.net")
    STORAGE_CONTAINER = os.getenv("STORAGE_CONTAINER", "ai-generated-images")

    # App Configuration Keys
    PROMPT_KEY = "OpenAIPrompt"
    NUMBER_OF_IMAGES_KEY = "NumberOfImagesToGenerate"
    OPENAI_SECRET_KEY = "OpenAISecretKey"
    COMMUNICATION_SERVICE_KEY = "CommunicationServiceConnectionString"
    SENDER_EMAIL_KEY = "SenderEmailAddress"
    PICTURE_FRAME_EMAIL_KEY = "PictureFrameEmailAddress"

    # When set (e.g. "OpenAIGenerateParams"), a single JSON setting replaces prompt + count
    GENERATE_PARAMS_KEY = os.getenv("GENERATE_PARAMS_KEY") or None

    # API Settings
    IMAGE_MODEL = "dall-e-2"
    IMAGE_SIZE = "1024x1024"
    RESPONSE_FORMAT = "b64_json"

    # Image Processing
    PNG_QUANTIZE_COLORS = 256
    PNG_COMPRESS_LEVEL = 9
    FRAME_SIZE = (1280, 800)
    RESIZE_IMAGES = True

    # Email
    EMAIL_SUBJECT = "Image for Picture Frame"
    EMAIL_BODY = "Image is attached."
    RECIPIENT_DISPLAY_NAME = "Picture Frame"
    ATTACHMENT_CONTENT_TYPE = "image/png"

    # Schedule (six-field NCRONTAB, every minute)
    SCHEDULE = os.getenv("PICTURE_FRAME_SCHEDULE", "0 * * * * *")

    # Re-raise so the host records the invocation as failed
    RAISE_ON_FAILURE = True

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
