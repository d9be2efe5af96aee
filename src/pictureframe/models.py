"""Typed records passed between pipeline stages."""

import base64
import uuid
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class PictureFrameConfiguration:
    """Settings resolved for a single invocation."""

    generate_params: Mapping[str, Any]
    openai_secret_key: str
    communication_service_connection_string: str
    sender_email_address: str
    picture_frame_email_address: str
    storage_account_url: str
    storage_container: str

    def __post_init__(self):
        # Read-only copy, detached from the caller's dict
        object.__setattr__(self, "generate_params", MappingProxyType(dict(self.generate_params)))

    @property
    def prompt(self) -> str:
        return self.generate_params["prompt"]

    @property
    def number_of_images(self) -> int:
        return int(self.generate_params.get("n", 1))


@dataclass
class GeneratedImage:
    """One generated image and the payloads produced by each stage."""

    base64: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = field(init=False, default="")
    compressed_base64: Optional[str] = None
    resized_base64: Optional[str] = None

    def __post_init__(self):
        self.name = f"{self.id}.png"

    @property
    def raw_bytes(self) -> bytes:
        return base64.b64decode(self.base64)

    @property
    def final_base64(self) -> str:
        """Most processed payload available."""
        return self.resized_base64 or self.compressed_base64 or self.base64
