from pathlib import Path
import logging
import logging.handlers

from evtrack.config import Config

LOG_FORMAT = '%(asctime)s.%(msecs)-03d|%(levelname)-8s|%(name)s: %(module)s.%(funcName)s %(lineno)d|%(message)s'


class LoggerFactory:
    """ Cached named loggers. Relative `log_file` names are placed under `Config.LOG_DIR`. """
    _instances = {}

    def get_logger(
        self,
        logger_name: str,
        log_file: str = None,
        log_level = None,
    ) -> logging.Logger:

        if logger_name in LoggerFactory._instances:
            return LoggerFactory._instances[logger_name]

        formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        logger = logging.getLogger(logger_name)
        logger.addHandler(self._with_formatter(logging.StreamHandler(), formatter))
        if log_file is not None:
            logger.addHandler(self._with_formatter(self._file_handler(log_file), formatter))

        if log_level is None:
            log_level = getattr(logging, str(Config.LOG_LEVEL).upper(), logging.INFO)
        logger.setLevel(log_level)

        LoggerFactory._instances[logger_name] = logger
        return logger

    @staticmethod
    def _file_handler(log_file: str) -> logging.Handler:
        path = Path(Config.LOG_DIR).joinpath(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.handlers.TimedRotatingFileHandler(filename=path, when='MIDNIGHT', backupCount=30, utc=True)

    @staticmethod
    def _with_formatter(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
        handler.setFormatter(formatter)
        return handler
