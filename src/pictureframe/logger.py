import logging
import sys
import uuid


class PipelineLogger:
    """Logging for picture frame runs, with messages tagged by invocation."""

    def __init__(self, log_level=logging.INFO):
        if isinstance(log_level, str):
            log_level = getattr(logging, log_level.upper(), logging.INFO)

        self.logger = logging.getLogger("picture_frame")
        self.logger.setLevel(log_level)
        self.invocation_id = None

        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)

        if not self.logger.handlers:
            self.logger.addHandler(console_handler)

    def start_invocation(self) -> str:
        """Tag every following message with a fresh invocation id."""
        self.invocation_id = uuid.uuid4().hex[:8]
        return self.invocation_id

    def end_invocation(self):
        self.invocation_id = None

    def image_stage(self, image_name: str, stage: str):
        self.info(f"{image_name}: {stage}")

    def _tag(self, message) -> str:
        if self.invocation_id:
            return f"[{self.invocation_id}] {message}"
        return str(message)

    def info(self, message):
        self.logger.info(self._tag(message))

    def debug(self, message):
        self.logger.debug(self._tag(message))

    def warning(self, message):
        self.logger.warning(self._tag(message))

    def error(self, message):
        self.logger.error(self._tag(message))

    def exception(self, message):
        self.logger.exception(self._tag(message))
