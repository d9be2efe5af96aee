"""
Unit tests for uploading raw images to blob storage.
"""

import base64

import pytest
from unittest.mock import MagicMock, Mock, patch

from pictureframe.models import GeneratedImage
from pictureframe.storage_upload import StorageUploader


class TestUploadImage:
    """Test blob uploads."""

    def test_uploads_decoded_bytes_under_image_name(self, config, logger, configuration, png_base64):
        container = MagicMock()
        image = GeneratedImage(base64=png_base64)

        result = StorageUploader(config, logger, configuration, container_client=container).upload_image(
            image, metadata={"prompt": "a sunset"}
        )

        assert result == image.name
        container.get_blob_client.assert_called_once_with(image.name)
        upload = container.get_blob_client.return_value.upload_blob
        upload.assert_called_once()
        assert upload.call_args.args[0] == base64.b64decode(png_base64)
        assert upload.call_args.kwargs["metadata"] == {"prompt": "a sunset"}
        assert upload.call_args.kwargs["content_settings"].content_type == "image/png"

    def test_metadata_is_optional(self, config, logger, configuration, png_base64):
        container = MagicMock()

        StorageUploader(config, logger, configuration, container_client=container).upload_image(
            GeneratedImage(base64=png_base64)
        )

        assert container.get_blob_client.return_value.upload_blob.call_args.kwargs["metadata"] is None

    def test_upload_failure_raises(self, config, logger, configuration, png_base64):
        container = MagicMock()
        container.get_blob_client.return_value.upload_blob.side_effect = Exception("Storage error")

        with pytest.raises(Exception) as exc_info:
            StorageUploader(config, logger, configuration, container_client=container).upload_image(
                GeneratedImage(base64=png_base64)
            )

        assert "Storage error" in str(exc_info.value)

    def test_container_client_built_with_credential(self, config, logger, configuration):
        credential = Mock()
        with patch("pictureframe.storage_upload.BlobServiceClient") as mock_service:
            uploader = StorageUploader(config, logger, configuration, credential=credential)

        mock_service.assert_called_once_with("https://example.blob.core.windows.net", credential=credential)
        mock_service.return_value.get_container_client.assert_called_once_with("ai-generated-images")
        assert uploader.container_client is mock_service.return_value.get_container_client.return_value
