"""
VibeScript Playground Package

Transpiles VibeScript (a small keyword-based toy language) into
Python-like pseudocode for display, and simulates running it by echoing
the literal arguments of its print statements.

ARCHITECTURAL GUARANTEE:
------------------------
The transpiler and simulator perform ZERO:
    - Variable binding
    - Expression evaluation
    - Syntax error reporting

Malformed input degrades to pass-through lines, never to exceptions.

Scheduling, display and rendering live in outer layers
(scheduler, backends) and consume these results unchanged.
"""

from vibescript.classifier import classify
from vibescript.session import PlaygroundSession, run
from vibescript.simulator import simulate
from vibescript.transpiler import transpile

__version__ = "0.1.0"

__all__ = ["PlaygroundSession", "classify", "run", "simulate", "transpile"]
