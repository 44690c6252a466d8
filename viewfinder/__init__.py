"""viewfinder - resolve logical view names to template files.

Exposes the resolver, the engine registry and the error types.
"""

from .engines import EngineFactory
from .engines import EngineInstance
from .engines import EngineResolver
from .errors import InvalidViewNameError
from .errors import SettingsError
from .errors import UnknownEngineError
from .errors import UnknownNamespaceError
from .errors import ViewNotFoundError
from .errors import ViewResolverError
from .paths import create_view_resolver
from .resolver import HINT_PATH_DELIMITER
from .resolver import ViewFinderProtocol
from .resolver import ViewResolver

__all__ = [
    "HINT_PATH_DELIMITER",
    "EngineFactory",
    "EngineInstance",
    "EngineResolver",
    "InvalidViewNameError",
    "SettingsError",
    "UnknownEngineError",
    "UnknownNamespaceError",
    "ViewFinderProtocol",
    "ViewNotFoundError",
    "ViewResolver",
    "ViewResolverError",
    "create_view_resolver",
]
