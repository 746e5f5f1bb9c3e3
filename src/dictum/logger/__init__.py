from dictum.logger.logger import ROOT_LOGGER_NAME, get_logger, logger, setup_logger

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "logger", "setup_logger"]
