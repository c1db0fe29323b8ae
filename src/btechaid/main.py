"""Bootstrap for the roster aid model."""

from __future__ import annotations

from btechaid.config import get_settings
from btechaid.interfaces import ILogger

LOADED_MESSAGE = "Battletech aid module loaded successfully"


def load_model(logger: ILogger | None = None) -> None:
    """Load the model, announcing success through ``logger`` when one is given."""

    if logger is not None and get_settings().announce_load:
        logger.log(LOADED_MESSAGE)
