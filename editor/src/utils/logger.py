"""Application-level error reporting"""
import logging
import sys

from PyQt5.QtWidgets import QMessageBox

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('ErrorHandler')
_main_window = None


def set_main_window(window):
    """Set the window used as parent for error popups"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Report an exception and re-raise it.

    Args:
        e: The exception to report
        user_message: Friendly message for the popup (defaults to str(e))
        title: Title for the popup dialog

    In DEBUG_MODE the exception is raised straight away so the full
    traceback reaches the console. Otherwise the traceback is logged, a
    critical popup is shown when a main window is registered, and the
    exception is raised.
    """
    if DEBUG_MODE:
        raise e

    _logger.error("%s: %s", title, user_message or e, exc_info=e)

    message = user_message if user_message else str(e)
    if _main_window:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error("No window for popup: %s - %s", title, message)

    raise e
