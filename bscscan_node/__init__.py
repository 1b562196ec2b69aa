"""
BscScan 액션 노드 패키지
"""
from .configuration import config, BscscanConfiguration
from .models import ExecutionContext, NetworkId, OperationDescriptor, RequestSpec, ResultEnvelope
from .networks import get_network_configs, resolve_network
from .operations import OPERATIONS, OperationRegistry, get_registry
from .request_builder import build_request, resolve_params
from .executor import execute_request, normalize_response
from .node import BscscanNode, get_node
from .utils import (
    BscscanNodeError,
    ConfigurationError,
    PreconditionError,
    TransportError,
    translate_error,
)

__all__ = [
    'config',
    'BscscanConfiguration',
    'ExecutionContext',
    'NetworkId',
    'OperationDescriptor',
    'RequestSpec',
    'ResultEnvelope',
    'get_network_configs',
    'resolve_network',
    'OPERATIONS',
    'OperationRegistry',
    'get_registry',
    'build_request',
    'resolve_params',
    'execute_request',
    'normalize_response',
    'BscscanNode',
    'get_node',
    'BscscanNodeError',
    'ConfigurationError',
    'PreconditionError',
    'TransportError',
    'translate_error',
]
