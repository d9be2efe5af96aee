"""Azure Function: email a freshly generated image to the picture frame on a timer."""

import azure.functions as func

from pictureframe.config import Config
from pictureframe.frame_processing import FrameProcessor
from pictureframe.logger import PipelineLogger

app = func.FunctionApp()


def run_picture_frame(timer: func.TimerRequest, config: Config = None) -> None:
    """Run one picture frame invocation for a timer tick."""
    config = config or Config()
    logger = PipelineLogger(config.LOG_LEVEL)

    if timer.past_due:
        logger.warning("Timer is past due, running anyway.")

    FrameProcessor(config, logger).run()


@app.timer_trigger(schedule=Config.SCHEDULE, arg_name="timer", run_on_startup=False, use_monitor=False)
def ai_digital_picture_frame(timer: func.TimerRequest) -> None:
    run_picture_frame(timer)
