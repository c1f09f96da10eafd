from .logging import LEVELS, LogMessage, log_to_dict

__all__ = ["LEVELS", "LogMessage", "log_to_dict"]
