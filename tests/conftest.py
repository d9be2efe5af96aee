import base64

import pytest
from unittest.mock import Mock

from pictureframe.config import Config
from pictureframe.logger import PipelineLogger
from pictureframe.models import PictureFrameConfiguration

from helpers import make_png


@pytest.fixture
def config():
    config = Config()
    config.GENERATE_PARAMS_KEY = None
    config.STORAGE_ACCOUNT_URL = "https://example.blob.core.windows.net"
    config.STORAGE_CONTAINER = "ai-generated-images"
    config.APP_CONFIGURATION_ENDPOINT = "https://example.azconfig.io"
    config.RESIZE_IMAGES = True
    config.RAISE_ON_FAILURE = True
    return config


@pytest.fixture
def logger():
    return Mock(spec=PipelineLogger)


@pytest.fixture
def configuration():
    return PictureFrameConfiguration(
        generate_params={"prompt": "a sunset", "n": 1, "response_format": "b64_json", "size": "1024x1024"},
        openai_secret_key="sk-test",
        communication_service_connection_string="endpoint=https://acs.example.com/;accesskey=abc",
        sender_email_address="sender@example.com",
        picture_frame_email_address="frame@example.com",
        storage_account_url="https://example.blob.core.windows.net",
        storage_container="ai-generated-images",
    )


@pytest.fixture
def png_base64():
    return base64.b64encode(make_png()).decode("ascii")
