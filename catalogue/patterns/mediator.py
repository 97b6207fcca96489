"""
Mediator pattern.
"""

# pylint: disable=too-few-public-methods

from typing import Dict, List

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class ChatRoom:
    """Participants talk only to the room; the room decides who hears what."""

    def __init__(self) -> None:
        self.members: Dict[str, "User"] = {}

    def join(self, user: "User") -> None:
        self.members[user.name] = user
        user.room = self

    def broadcast(self, sender: "User", message: str) -> None:
        for name, member in self.members.items():
            if name != sender.name:
                member.receive(f"[{sender.name}] {message}")


class User:
    def __init__(self, name: str) -> None:
        self.name = name
        self.room = None
        self.inbox: List[str] = []

    def say(self, message: str) -> None:
        self.room.broadcast(self, message)

    def receive(self, message: str) -> None:
        self.inbox.append(message)


@pattern()
class MediatorDemo(PatternDemo):
    name = "Mediator"
    category = PatternCategory.BEHAVIORAL
    intent = (
        "Define an object that encapsulates how a set of objects interact, "
        "promoting loose coupling by keeping objects from referring to each "
        "other explicitly."
    )
    summary = """
        Users never hold references to one another. Everything they say goes
        to the chat room, which knows the membership and routes each message.
        Changing the interaction rules (private messages, muting) means
        changing only the room.
    """
    applicability = (
        "a set of objects communicate in well-defined but complex ways",
        "reusing an object is hard because it refers to many others",
        "behaviour distributed between classes should be customizable without subclassing",
    )
    consequences = (
        "colleagues are decoupled from one another",
        "many-to-many interactions become one-to-many",
        "the mediator itself can grow into a monolith",
    )
    participants = (ChatRoom, User)

    def run(self) -> None:
        room = ChatRoom()
        alice, bob, carol = User("alice"), User("bob"), User("carol")
        for user in (alice, bob, carol):
            room.join(user)

        alice.say("hi all")
        bob.say("hello alice")
        for user in (alice, bob, carol):
            self.emit(f"{user.name} received: {user.inbox}")
