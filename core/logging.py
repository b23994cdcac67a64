import logging
import logging.handlers
import os

from core.config import settings


def setup_logging():
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(settings.LOG_LEVEL)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove any existing handlers
    root_logger.handlers = []
    root_logger.addHandler(console_handler)

    if settings.LOG_DIR:
        os.makedirs(settings.LOG_DIR, exist_ok=True)

        all_handler = logging.handlers.RotatingFileHandler(
            os.path.join(settings.LOG_DIR, 'flashcards.log'),
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        all_handler.setFormatter(file_formatter)
        all_handler.setLevel(logging.DEBUG)

        error_handler = logging.handlers.RotatingFileHandler(
            os.path.join(settings.LOG_DIR, 'error.log'),
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        error_handler.setFormatter(file_formatter)
        error_handler.setLevel(logging.ERROR)

        root_logger.addHandler(all_handler)
        root_logger.addHandler(error_handler)

    for logger_name in ('uvicorn.access',):
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info('Logging setup completed')
