import logging

from src.env import get_log_level

LOG_LEVEL = get_log_level()

# Handlers live on the package logger; the root logger belongs to the host application
package_logger = logging.getLogger(__name__)
for handler in package_logger.handlers[:]:
    package_logger.removeHandler(handler)

handler = logging.StreamHandler()
handler.setLevel(LOG_LEVEL)


class ColorFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[41m",  # Red background
    }
    GREY = "\033[90m"
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy; the original record may reach other handlers
        record = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        record.name = f"{self.GREY}{record.name}{self.RESET}"
        record.link = f"\033[34m{record.pathname}:{record.lineno}\033[0m"
        return super().format(record)


formatter = ColorFormatter("%(asctime)s %(levelname)-16s %(name)-32s [%(link)s] \n%(message)s\n")
handler.setFormatter(formatter)
package_logger.addHandler(handler)
package_logger.setLevel(LOG_LEVEL)
package_logger.propagate = False

package_logger.debug(f"Package logger initialized with level: {logging.getLevelName(package_logger.level)}")
