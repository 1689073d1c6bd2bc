from .grammar import GRAMMAR, Alternative, Grammar, Production, describe_expected
from .outcome import Accepted, Outcome, RecognitionError, Rejected
from .reader import Cursor
from .recognizer import Recognizer, check, recognize
from .streaming import RecognizerState, StreamingRecognizer

__all__ = [
    "GRAMMAR",
    "Alternative",
    "Grammar",
    "Production",
    "describe_expected",
    "Cursor",
    "Recognizer",
    "recognize",
    "check",
    "Accepted",
    "Rejected",
    "Outcome",
    "RecognitionError",
    "StreamingRecognizer",
    "RecognizerState",
]
