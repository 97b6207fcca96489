"""
Facade pattern.
"""

# pylint: disable=too-few-public-methods

from typing import List

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


class CPU:
    def freeze(self) -> str:
        return "cpu: freeze"

    def jump(self, position: int) -> str:
        return f"cpu: jump to {position:#x}"

    def execute(self) -> str:
        return "cpu: execute"


class Memory:
    def load(self, position: int, data: str) -> str:
        return f"memory: load '{data}' at {position:#x}"


class Disk:
    def read(self, sector: int, size: int) -> str:
        return f"boot sector {sector}+{size}"


class Computer:
    """One call in front of a boot sequence that touches three subsystems."""

    BOOT_ADDRESS = 0x7C00

    def __init__(self) -> None:
        self.cpu = CPU()
        self.memory = Memory()
        self.disk = Disk()

    def start(self) -> List[str]:
        return [
            self.cpu.freeze(),
            self.memory.load(self.BOOT_ADDRESS, self.disk.read(0, 512)),
            self.cpu.jump(self.BOOT_ADDRESS),
            self.cpu.execute(),
        ]


@pattern()
class FacadeDemo(PatternDemo):
    name = "Facade"
    category = PatternCategory.STRUCTURAL
    intent = (
        "Provide a unified interface to a set of interfaces in a subsystem, "
        "making the subsystem easier to use."
    )
    summary = """
        Starting a computer needs the CPU, memory and disk driven in the
        right order. The facade owns that order behind a single ``start()``
        call. The subsystem classes stay public for the rare client that
        needs them directly.
    """
    applicability = (
        "you want a simple interface to a complex subsystem",
        "there are many dependencies between clients and implementation classes",
        "you want to layer a subsystem and give each layer an entry point",
    )
    consequences = (
        "clients deal with fewer objects",
        "coupling between clients and the subsystem is weakened",
        "the subsystem can still be used directly where needed",
    )
    participants = (CPU, Memory, Disk, Computer)

    def run(self) -> None:
        for step in Computer().start():
            self.emit(step)
