"""String enums for the closed value sets of line chart markup.

Members are built from the SSOT files (src/shared/SSOT/) by the shared loader.
"""

from enum import Enum
from typing import TYPE_CHECKING

from src.shared.ssot_loader import create_enum

if TYPE_CHECKING:  # Type stubs (match runtime signature: str subclass of Enum)

    class LineDashType(str, Enum): ...

    class MarkerSymbol(str, Enum): ...

    class ChartGrouping(str, Enum): ...


LineDashType = create_enum("LineDashType", "LineDashType.yml")
MarkerSymbol = create_enum("MarkerSymbol", "MarkerSymbol.yml")
ChartGrouping = create_enum("ChartGrouping", "ChartGrouping.yml")

# Input-only sentinel for "let the application pick the marker symbol"
DEFAULT_MARKER = "default"

__all__ = [
    "LineDashType",
    "MarkerSymbol",
    "ChartGrouping",
    "DEFAULT_MARKER",
]
