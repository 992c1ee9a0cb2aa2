"""
Output - Console output formatting.

Provides pretty-printed output with colors and formatting.
"""

import json
import sys
from typing import Any

from ..core.domain import Shipment


class Colors:
    """ANSI color codes."""
    
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"
    
    BG_YELLOW = "\033[43m"


class Symbols:
    """Unicode symbols for output."""
    
    CHECK = "✓"
    CROSS = "✗"
    ARROW = "→"
    WARN = "⚠"
    INFO = "ℹ"
    GEAR = "⚙"


class Console:
    """Console output helper with colors and formatting."""
    
    def __init__(self, color: bool = True):
        self.color = color and sys.stdout.isatty()
    
    def _c(self, text: str, *codes: str) -> str:
        """Apply color codes to text."""
        if not self.color:
            return text
        return "".join(codes) + text + Colors.RESET
    
    def print(self, text: str = "") -> None:
        """Print text."""
        print(text)
    
    def section(self, text: str) -> None:
        """Print a section header."""
        self.print()
        self.print(self._c(f"{Symbols.ARROW} {text}", Colors.BOLD, Colors.BLUE))
    
    def success(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.CHECK} {text}", Colors.GREEN))
    
    def error(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.CROSS} {text}", Colors.RED))
    
    def warning(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.WARN} {text}", Colors.YELLOW))
    
    def info(self, text: str) -> None:
        self.print(self._c(f"  {Symbols.INFO} {text}", Colors.CYAN))
    
    def detail(self, text: str) -> None:
        """Print detail text (dimmed)."""
        self.print(self._c(f"    {text}", Colors.DIM))
    
    def dry_run_banner(self) -> None:
        """Print dry-run mode banner."""
        self.print()
        banner = f"  {Symbols.GEAR} DRY-RUN MODE - Nothing will be sent to DHL"
        if self.color:
            self.print(f"{Colors.BG_YELLOW}{Colors.BOLD}{banner}{Colors.RESET}")
        else:
            self.print(f"*** {banner} ***")
        self.print()
    
    def request_preview(self, payload: dict[str, Any]) -> None:
        """Print the request payload that would be sent."""
        self.section("Shipment Request")
        self.print(json.dumps(payload, indent=2))
    
    def shipment_result(self, shipment: Shipment) -> None:
        """Print a created shipment summary."""
        self.section("Shipment Created")
        self.print()
        self.success(f"Tracking number: {shipment.shipment_tracking_number}")
        
        if shipment.dispatch_confirmation_number:
            self.info(f"Pickup confirmation: {shipment.dispatch_confirmation_number}")
        if shipment.tracking_url:
            self.detail(f"Tracking URL: {shipment.tracking_url}")
        if shipment.cancel_pickup_url:
            self.detail(f"Cancel pickup: {shipment.cancel_pickup_url}")
        
        self.detail(f"Packages: {len(shipment.packages)}, documents: {len(shipment.documents)}")
        
        if shipment.warnings:
            self.print()
            self.warning(f"{len(shipment.warnings)} warning(s):")
            for w in shipment.warnings[:5]:
                self.detail(str(w))
            if len(shipment.warnings) > 5:
                self.detail(f"... and {len(shipment.warnings) - 5} more")
