"""Adapters: sinks, handler, stdlib logging bridge and context storage."""
