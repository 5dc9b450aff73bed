__all__ = ["markers"]
