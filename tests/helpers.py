"""Shared builders for test data and fake Azure clients."""

import io
from unittest.mock import MagicMock

from azure.appconfiguration import ConfigurationSetting, SecretReferenceConfigurationSetting
from azure.core.exceptions import ResourceNotFoundError
from PIL import Image


def make_png(size=(64, 48), mode="RGB", color=(200, 80, 40)) -> bytes:
    """Build a PNG with a gradient so quantization has real work to do."""
    if mode == "RGBA" and len(color) == 3:
        color = color + (255,)
    img = Image.new(mode, size, color)
    for x in range(size[0]):
        for y in range(0, size[1], 4):
            pixel = (x * 4 % 256, y * 5 % 256, 120)
            if mode == "RGBA":
                pixel = pixel + (255 if x % 2 else 128,)
            img.putpixel((x, y), pixel)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def png_size(data: bytes):
    img = Image.open(io.BytesIO(data))
    assert img.format == "PNG"
    return img.size


def app_config_client(settings: dict):
    """Fake App Configuration client backed by a dict of key -> setting."""
    client = MagicMock()

    def get_configuration_setting(key):
        if key not in settings:
            raise ResourceNotFoundError(f"Setting {key} not found")
        return settings[key]

    client.get_configuration_setting.side_effect = get_configuration_setting
    return client


def default_settings():
    return {
        "OpenAIPrompt": ConfigurationSetting(key="OpenAIPrompt", value="a sunset"),
        "NumberOfImagesToGenerate": ConfigurationSetting(key="NumberOfImagesToGenerate", value="2"),
        "OpenAISecretKey": SecretReferenceConfigurationSetting(
            "OpenAISecretKey", "https://frame-vault.vault.azure.net/secrets/openai-key"
        ),
        "CommunicationServiceConnectionString": SecretReferenceConfigurationSetting(
            "CommunicationServiceConnectionString", "https://frame-vault.vault.azure.net/secrets/acs-connection/abc123"
        ),
        "SenderEmailAddress": ConfigurationSetting(key="SenderEmailAddress", value="sender@example.com"),
        "PictureFrameEmailAddress": ConfigurationSetting(key="PictureFrameEmailAddress", value="frame@example.com"),
    }
