from .connection import SimConnectionConstants
from .navdata import NavdataConstants, LogbookConstants
from .simconnect import SimVars, SimConnectRecv

__all__ = [
    'SimConnectionConstants',
    'NavdataConstants',
    'LogbookConstants',
    'SimVars',
    'SimConnectRecv'
]
