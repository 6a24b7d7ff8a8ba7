import os
import logging
from rich.logging import RichHandler
from rich.console import Console

logging.basicConfig(
    level=os.environ.get("RIGID_WARP_LOG_LEVEL", "INFO").upper(),
    format="PID %(process)d %(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=Console())],
)


LogWriter = logging.getLogger("rigid-warp")
