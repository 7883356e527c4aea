from .messaging import MessageBus, MessageCatalog
from .pointer import L, SemanticPointer

# Global singletons
catalog = MessageCatalog()
bus = MessageBus(catalog)

__all__ = ["bus", "catalog", "L", "SemanticPointer", "MessageBus", "MessageCatalog"]
