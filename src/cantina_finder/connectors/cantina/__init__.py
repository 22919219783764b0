"""Cantina opportunities connector."""

from cantina_finder.connectors.cantina.connector import CantinaConnector

__all__ = ["CantinaConnector"]
