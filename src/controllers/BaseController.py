from helpers.config import get_settings

class BaseController:

    def __init__(self, app_settings=None):
        self.app_settings = app_settings or get_settings()
