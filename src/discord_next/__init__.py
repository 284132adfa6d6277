from .client import *
from .enums import *
from .env import *
from .errors import *
from .http import *
from .models import *
from .telemetry import *
from .types import *
from .version import VERSION as __version__

from . import models


__all__ = (
    # client.py
    'Discord',
    # enums.py
    'BitFlags',
    'IntegerEnum',
    'StringBitFlags',
    'StringEnum',
    # env.py
    'Config',
    'Token',
    # errors.py
    'DecodeError',
    'DiscordNextException',
    'Forbidden',
    'HTTPException',
    'InvalidConfig',
    'InvalidFormat',
    'NotFound',
    'Overflow',
    'ServerError',
    'TransportError',
    'TypeMismatch',
    'Unauthorized',
    'UnrecognizedValue',
    # http.py
    'Route',
    # telemetry.py
    'configure',
    # types.py
    'EPOCH',
    'AnyId',
    'Id',
    'Snowflake',
    # models
    'models',
    *models.__all__,
)
