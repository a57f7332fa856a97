import threading


class Singleton(type):
    _instances = {}
    # Reentrant: a singleton constructor may create another singleton
    _lock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        # Keyed by class name so duplicate import paths share one instance
        class_key = cls.__name__
        if class_key not in cls._instances:
            with cls._lock:
                if class_key not in cls._instances:
                    cls._instances[class_key] = super(Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[class_key]

    @classmethod
    def reset(mcs, class_name: str) -> None:
        """Forget a cached instance so the next call rebuilds it."""
        with mcs._lock:
            mcs._instances.pop(class_name, None)
