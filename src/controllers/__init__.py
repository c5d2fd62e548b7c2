from .BaseController import BaseController
from .DataController import DataController
from .LLMController import LLMController
from .EmailController import EmailController
