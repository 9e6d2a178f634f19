from .store import open_store, close_store
from .demo import run_demo
from .interactive import run_interactive

__all__ = ['open_store', 'close_store', 'run_demo', 'run_interactive']
