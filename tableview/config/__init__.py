from .loader import load_view_config
from .model import ViewConfig

__all__ = ["ViewConfig", "load_view_config"]
