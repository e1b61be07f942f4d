# Renderers for sentences and decoded AIS messages

from .messages import MESSAGE_REGISTRY
from .registry import DispatchRegistry
from .sentences import SENTENCE_REGISTRY

__all__ = [
    'DispatchRegistry',
    'MESSAGE_REGISTRY',
    'SENTENCE_REGISTRY'
]
