"""modinput: execution harness for modular inputs.

A modular input is a program the host launches as a subprocess. The harness
selects the invocation mode from argv, reads and writes the XML handshake
documents, and turns failures into side-channel log lines.
"""

__version__ = "0.1.0"

from modinput.harness.script import Script, run_script
from modinput.plugins.base import BaseModularInput

__all__ = [
    "BaseModularInput",
    "Script",
    "__version__",
    "run_script",
]
