"""Exceptions raised by gcplog."""


class GCPLogError(Exception):
    """Base class for gcplog errors."""


class HandlerError(GCPLogError):
    """A record could not be serialized or written to the sink.

    The record is dropped. The original exception is available as
    ``__cause__``.
    """
