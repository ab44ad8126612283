import threading


class SingletonMeta(type):
    """Metaclass shared by every singleton class"""
    _lock = threading.RLock()  # re-entrant so one singleton may build another in __init__

    def __call__(cls, *args, **kwargs):
        # look at the class's own dict so a subclass never reuses its parent's instance
        if "_instance" not in cls.__dict__:
            with cls._lock:  # double-checked lock
                if "_instance" not in cls.__dict__:
                    cls._instance = super().__call__(*args, **kwargs)
        return cls._instance


class Singleton(metaclass=SingletonMeta):
    """Singleton base class, subclasses only need to inherit from it"""

    @classmethod
    def instance(cls, *args, **kwargs):
        # return the existing instance directly when no arguments are given
        if cls.has_instance() and not args and not kwargs:
            return cls._instance
        return cls(*args, **kwargs)

    @classmethod
    def has_instance(cls) -> bool:
        return "_instance" in cls.__dict__

    @classmethod
    def reset_instance(cls):
        """Drop the shared instance so the next access builds a new one (tests only)"""
        with SingletonMeta._lock:
            if "_instance" in cls.__dict__:
                delattr(cls, "_instance")
