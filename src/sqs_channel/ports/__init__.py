from .channel import IMessageChannel, IPollableChannel

__all__ = ["IMessageChannel", "IPollableChannel"]
