"""closure-complete - Auto-import suggestions for Closure namespaces."""

from closure_complete.config import CompletionItem, ImportInfo, IndexConfig
from closure_complete.engine import ImportEngine

__version__ = "0.1.0"
__all__ = ["CompletionItem", "ImportEngine", "ImportInfo", "IndexConfig"]
