"""
MiMi Vibe backend: a small service that forwards questions to an LLM
provider. Layout: api/, core/, providers/, schemas/.
"""
from .main import create_app

__all__ = ["__version__", "create_app"]
__version__ = "0.1.0"
