"""
➡️ But : Configurer le logging une seule fois, au démarrage (API ou script).

Les modules utilisent simplement :

logger = logging.getLogger(__name__)
"""

import logging
import sys
from typing import Union


class _NoiseFilter(logging.Filter):
    """Garde nos logs (app.*) ; le reste seulement à partir de WARNING."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "app" or record.name.startswith("app."):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Évite les doublons si appelé deux fois (reload uvicorn, tests…)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.addFilter(_NoiseFilter())
    root.addHandler(handler)

    logging.captureWarnings(True)
