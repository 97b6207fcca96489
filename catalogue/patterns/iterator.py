"""
Iterator pattern.
"""

# pylint: disable=too-few-public-methods

from typing import Iterator, List

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class Playlist:
    def __init__(self, *songs: str) -> None:
        self._songs: List[str] = list(songs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._songs)

    def shuffled(self, step: int) -> Iterator[str]:
        """Visit every song once, jumping ``step`` places at a time."""
        count = len(self._songs)
        index = 0
        for _ in range(count):
            yield self._songs[index]
            index = (index + step) % count


@pattern()
class IteratorDemo(PatternDemo):
    name = "Iterator"
    category = PatternCategory.BEHAVIORAL
    intent = (
        "Provide a way to access the elements of an aggregate object "
        "sequentially without exposing its underlying representation."
    )
    summary = """
        Python builds this pattern into the language: ``__iter__`` returns
        an iterator and ``for`` drives it. A collection can also offer
        several traversals side by side; generators make each one a few
        lines, and none of them leaks the list the playlist keeps inside.
    """
    applicability = (
        "you want to access an aggregate's contents without exposing its internals",
        "an aggregate should support multiple traversals",
        "you want a uniform interface for traversing different structures",
    )
    consequences = (
        "variations in traversal are easy to add",
        "the aggregate's interface stays small",
        "several traversals can be in progress at once",
    )
    participants = (Playlist,)

    def run(self) -> None:
        playlist = Playlist("intro", "verse", "chorus", "bridge", "outro")
        self.emit("in order:", ", ".join(playlist))
        # 2 is coprime with 5, so every song is visited
        self.emit("shuffled:", ", ".join(playlist.shuffled(2)))
