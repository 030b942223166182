"""Protocol definitions for pluggable collaborators."""

from .scanner import NeighborScanner, NeighborScannerFactory

__all__ = ["NeighborScanner", "NeighborScannerFactory"]
