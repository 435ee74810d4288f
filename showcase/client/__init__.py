from . import selectors
from .api import PortfolioClient
from .controller import ClientController
from .state import ADD_PROJECT, ViewState, reduce

__all__ = ['ADD_PROJECT', 'ClientController', 'PortfolioClient', 'ViewState', 'reduce', 'selectors']
