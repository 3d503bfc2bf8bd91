"""Public configuration API."""

from .loader import EnvVars, load_settings
from .models import DEFAULT_NAMESPACE, Settings

__all__ = ["DEFAULT_NAMESPACE", "EnvVars", "Settings", "load_settings"]
