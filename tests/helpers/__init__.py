from .mocks import MockTransport, RecordingHandler

__all__ = [
    "MockTransport",
    "RecordingHandler",
]
