import logging
import os
from datetime import datetime
from logging import WARNING, FileHandler
from logging.handlers import TimedRotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [%(filename)s (%(funcName)s:%(lineno)d)] - %(message)s"


class GetLog:
    logger = None
    log_folder = None

    @classmethod
    def get_log(cls, log_dir="logs", level="info", shared_log_folder=None):
        """Get logger and initialize logging system.

        The root logger is configured once per process; later calls return
        it unchanged.

        Args:
            log_dir (str): Root directory of the timestamped run folders
            level (str): Level name for the run log and the console
            shared_log_folder (str): Existing folder to log into instead of a new one
        """
        if cls.logger is None:
            if shared_log_folder:
                cls.log_folder = shared_log_folder
            else:
                current_time = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
                cls.log_folder = os.path.join(log_dir, current_time)

                # Store timestamp in environment variable
                os.environ["EMERGENT_QA_TIMESTAMP"] = current_time

            os.makedirs(cls.log_folder, exist_ok=True)

            log_level = logging.getLevelName(str(level).upper())
            if not isinstance(log_level, int):
                log_level = logging.INFO

            cls.logger = logging.getLogger()
            cls.logger.setLevel(log_level)

            fm = logging.Formatter(LOG_FORMAT)

            # Main log file, rotated at midnight
            th = TimedRotatingFileHandler(
                filename=os.path.join(cls.log_folder, "log.log"),
                when="midnight",
                interval=1,
                backupCount=3,
                encoding="utf-8",
            )
            th.setLevel(log_level)
            th.setFormatter(fm)
            cls.logger.addHandler(th)

            error_handler = FileHandler(filename=os.path.join(cls.log_folder, "error.log"), encoding="utf-8")
            error_handler.setLevel(WARNING)
            error_handler.setFormatter(fm)
            cls.logger.addHandler(error_handler)

            console_handler = logging.StreamHandler()
            console_handler.setLevel(log_level)
            console_handler.setFormatter(fm)
            cls.logger.addHandler(console_handler)

        return cls.logger
