"""Constants shared by scripts and tests.

Kept free of project and third-party imports so that scripts/ can use it
without pulling in tests/, and tests can use it without running scripts.
"""

from __future__ import annotations
