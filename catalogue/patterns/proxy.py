"""
Proxy pattern.
"""

# pylint: disable=too-few-public-methods

from typing import List, Optional

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class HighResImage:
    def __init__(self, filename: str, log: List[str]) -> None:
        self.filename = filename
        log.append(f"loading {filename} from disk")

    def display(self) -> str:
        return f"displaying {self.filename}"


class ImageProxy:
    """Stands in for the image and loads it on first display."""

    def __init__(self, filename: str, log: List[str]) -> None:
        self.filename = filename
        self._log = log
        self._image: Optional[HighResImage] = None

    def display(self) -> str:
        if self._image is None:
            self._image = HighResImage(self.filename, self._log)
        return self._image.display()


@pattern()
class ProxyDemo(PatternDemo):
    name = "Proxy"
    category = PatternCategory.STRUCTURAL
    intent = "Provide a surrogate or placeholder for another object to control access to it."
    summary = """
        The proxy has the interface of the real image, so clients can't
        tell them apart, but it defers the expensive load until the image
        is actually displayed. Other proxies control access in different
        ways: remote proxies hide a network hop, protection proxies check
        permissions, caching proxies reuse results.
    """
    applicability = (
        "creating the real object is expensive and may never be needed (virtual proxy)",
        "access to the real object needs checks (protection proxy)",
        "the real object lives in another address space (remote proxy)",
    )
    consequences = (
        "an indirection point where access policy can live",
        "clients are unaware of the policy",
        "responses may be delayed unpredictably on first use",
    )
    participants = (HighResImage, ImageProxy)

    def run(self) -> None:
        log: List[str] = []
        image = ImageProxy("photo.png", log)
        self.emit("proxy created, loads so far:", len(log))
        self.emit(image.display())
        self.emit(image.display())
        for entry in log:
            self.emit("log:", entry)
