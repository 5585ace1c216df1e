"""Mode-specific scanners for the linemark lexer.

- block: classifies lines while no fence is open
- fence: collects lines inside an open fence
"""

from linemark.lexer.scanners.block import BlockScannerMixin
from linemark.lexer.scanners.fence import FenceScannerMixin

__all__ = ["BlockScannerMixin", "FenceScannerMixin"]
