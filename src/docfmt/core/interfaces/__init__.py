from .data import DataReaderProtocol, DataReaderRegistryProtocol
from .engine import AssemblyEngineProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .output import OutputWriterProtocol
from .templating import TemplateEngineProtocol, TemplateLookupProtocol
from .walker import TreeCollectorProtocol

__all__ = [
    'AssemblyEngineProtocol',
    'DataReaderProtocol',
    'DataReaderRegistryProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'OutputWriterProtocol',
    'TemplateEngineProtocol',
    'TemplateLookupProtocol',
    'TreeCollectorProtocol',
]
