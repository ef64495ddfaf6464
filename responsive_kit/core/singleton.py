"""
singleton.py — responsive-kit
==============================
Single source of the Singleton pattern in the toolkit.

Two flavours, depending on the class:

  ① QObjectSingletonMixin  ← classes deriving from QObject
        class ViewportManager(QObject, QObjectSingletonMixin): ...
        ViewportManager.get_instance()

  ② SingletonMeta          ← plain classes (no Qt)
        class Config(metaclass=SingletonMeta): ...
        Config()  # or Config.get_instance()

Both:
  - thread-safe with double-checked locking
  - support clear_instance() for tests
  - log creation and removal at DEBUG
"""
from __future__ import annotations

import threading
import logging
from typing import Any, Dict, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ─────────────────────────────────────────────────────────────────────────────
# ① QObjectSingletonMixin: for QObject subclasses
# ─────────────────────────────────────────────────────────────────────────────

class QObjectSingletonMixin:
    """
    Adds a thread-safe get_instance() to a QObject subclass.

    A metaclass cannot be combined with QObject (it clashes with the
    shiboken metaclass), hence the mixin. Direct construction still
    works for objects that should not be shared.
    """

    _singleton_instances: Dict[type, Any] = {}
    _singleton_lock: threading.Lock = threading.Lock()

    @classmethod
    def get_instance(cls: Type[T]) -> T:
        """Return the shared instance, creating it on first use."""
        if cls not in cls._singleton_instances:
            with cls._singleton_lock:
                if cls not in cls._singleton_instances:
                    instance = cls()
                    cls._singleton_instances[cls] = instance
                    logger.debug(f"[Singleton] Created: {cls.__name__}")
        return cls._singleton_instances[cls]

    @classmethod
    def clear_instance(cls) -> None:
        """Drop the shared instance (tests only)."""
        with cls._singleton_lock:
            if cls in cls._singleton_instances:
                del cls._singleton_instances[cls]
                logger.debug(f"[Singleton] Cleared: {cls.__name__}")


# ─────────────────────────────────────────────────────────────────────────────
# ② SingletonMeta: for plain classes
# ─────────────────────────────────────────────────────────────────────────────

class SingletonMeta(type):
    """
    Metaclass making a plain class a thread-safe singleton.

    Constructor arguments only take effect on the first call; call
    clear_instance() first to rebuild with different arguments.
    """

    _instances: Dict[type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    instance = super().__call__(*args, **kwargs)
                    cls._instances[cls] = instance
                    logger.debug(f"[Singleton] Created: {cls.__name__}")
        return cls._instances[cls]

    def get_instance(cls, *args, **kwargs):
        """Same as __call__, mirrors QObjectSingletonMixin."""
        return cls(*args, **kwargs)

    def clear_instance(cls) -> None:
        """Drop the instance (tests only)."""
        with cls._lock:
            if cls in cls._instances:
                del cls._instances[cls]
                logger.debug(f"[Singleton] Cleared: {cls.__name__}")


__all__ = ["QObjectSingletonMixin", "SingletonMeta"]
