from .configure_logging import configure_from_settings, configure_logger
