import logging
from rich.logging import RichHandler
from datetime import datetime

from config.env_config import LOG_LEVEL

# Silence noisy libraries BEFORE logger creation
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.CRITICAL)
logging.getLogger("asyncio").setLevel(logging.CRITICAL)
logging.getLogger("python_multipart.multipart").setLevel(logging.CRITICAL)
logging.getLogger("redis").setLevel(logging.WARNING)


class PrettyFormatter(logging.Formatter):
    def format(self, record):
        msg_lines = record.getMessage().splitlines() or [""]

        # Title = first line
        title = f"[{record.name}:{record.levelname}]  {msg_lines[0]}"

        # Body = remaining lines
        body = "\n".join(msg_lines[1:]) if len(msg_lines) > 1 else ""

        now = datetime.now().strftime("%d-%m-%Y %H:%M:%S")

        top_bar = f"─" * 40 + f" {now} " + "─" * 40
        divider = "------------------------------------------------------------"

        if body:
            return f"{top_bar}\n{title}\n{divider}\n{body}"
        else:
            return f"{top_bar}\n{title}"


def get_logger(name="LocalApi"):
    handler = RichHandler(
        rich_tracebacks=True,
        markup=False,
        show_time=False,
        show_level=False,
        show_path=False
    )
    handler.setFormatter(PrettyFormatter())

    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)

    # prevent multiple handlers if get_logger is called twice
    if not logger.handlers:
        logger.addHandler(handler)

    logger.propagate = False
    return logger
