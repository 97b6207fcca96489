"""
Singleton pattern.

The instance is created by an initialize-once accessor guarded by a
lock; the class itself stays an ordinary class.
"""

# pylint: disable=too-few-public-methods, global-statement

import threading
from typing import Dict, Optional

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class Settings:
    def __init__(self) -> None:
        self.values: Dict[str, str] = {"theme": "light"}


_settings: Optional[Settings] = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    with _settings_lock:
        _settings = None


@pattern()
class SingletonDemo(PatternDemo):
    name = "Singleton"
    category = PatternCategory.CREATIONAL
    intent = "Ensure a class has only one instance, and provide a global point of access to it."
    summary = """
        Everything that needs the shared object asks one accessor for it.
        The first call creates the instance under a lock and every later
        call returns the same object. The class has a plain constructor;
        uniqueness is a property of how the program obtains instances, not
        a trick inside the class.
    """
    applicability = (
        "there must be exactly one instance of a class, reachable from a known place",
        "the sole instance is expensive and should be created lazily",
    )
    consequences = (
        "access to the sole instance is controlled in one place",
        "the instance is effectively global state, which makes tests harder",
        "lazy creation needs a lock when several threads can race to it",
    )
    participants = (Settings, get_settings)

    def run(self) -> None:
        reset_settings()
        first = get_settings()
        first.values["theme"] = "dark"
        second = get_settings()
        self.emit("same instance:", first is second)
        self.emit("theme seen through second reference:", second.values["theme"])
        reset_settings()
