"""dialectcss: compile a localized stylesheet dialect into canonical CSS."""
from __future__ import annotations

__version__ = "0.1.0"

from dialectcss.config import CompilerConfig  # noqa: E402
from dialectcss.compiler import CompileResult, Compiler  # noqa: E402
from dialectcss.session import StyleSession  # noqa: E402

__all__ = [
    "__version__",
    "CompilerConfig",
    "CompileResult",
    "Compiler",
    "StyleSession",
]
