from .message import MessageID, message_name
from .sentence import AIS_FRAGMENT_IDS, AISFragment, AssembledPayload, Sentence, SentenceID

__all__ = [
    'AIS_FRAGMENT_IDS',
    'AISFragment',
    'AssembledPayload',
    'MessageID',
    'Sentence',
    'SentenceID',
    'message_name'
]
