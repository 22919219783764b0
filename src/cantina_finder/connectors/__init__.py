"""Source connectors for opportunity listings."""

from cantina_finder.connectors.base import BaseConnector
from cantina_finder.connectors.cantina import CantinaConnector

__all__ = ["BaseConnector", "CantinaConnector"]
