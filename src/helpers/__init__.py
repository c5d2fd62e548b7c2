from .config import get_settings, settings
