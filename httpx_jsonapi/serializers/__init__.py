"""Response document deserialisation."""

from .base import JSONAPIDeserializer, deserialise

__all__ = ["JSONAPIDeserializer", "deserialise"]
