from .users import UserTools

__all__ = ["UserTools"]
