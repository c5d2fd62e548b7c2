from .EmailFactory import EmailFactory
