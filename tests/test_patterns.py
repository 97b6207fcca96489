"""Tests for the individual pattern demos and their participants."""

import threading

import pytest

from catalogue.interpreter import evaluate
from catalogue.patterns.abstract_factory import AbstractFactoryDemo
from catalogue.patterns.adapter import AdapterDemo
from catalogue.patterns.bridge import BridgeDemo
from catalogue.patterns.builder import BuilderDemo
from catalogue.patterns.chain_of_responsibility import ChainOfResponsibilityDemo
from catalogue.patterns.command import AppendCommand, CommandDemo, Document, Editor
from catalogue.patterns.composite import CompositeDemo
from catalogue.patterns.decorator import DecoratorDemo
from catalogue.patterns.facade import FacadeDemo
from catalogue.patterns.factory_method import FactoryMethodDemo
from catalogue.patterns.flyweight import FlyweightDemo, TreeTypeFactory
from catalogue.patterns.interpreter import InterpreterDemo
from catalogue.patterns.iterator import IteratorDemo
from catalogue.patterns.mediator import MediatorDemo
from catalogue.patterns.memento import MementoDemo
from catalogue.patterns.observer import ObserverDemo
from catalogue.patterns.prototype import Instance, PrototypeDemo, Template
from catalogue.patterns.proxy import ProxyDemo
from catalogue.patterns.singleton import SingletonDemo, get_settings, reset_settings
from catalogue.patterns.state import StateDemo
from catalogue.patterns.strategy import StrategyDemo
from catalogue.patterns.template_method import TemplateMethodDemo
from catalogue.patterns.visitor import AreaVisitor, Circle, SvgVisitor, VisitorDemo


class TestCreationalDemos:
    """Test creational pattern demos."""

    def test_abstract_factory(self):
        assert AbstractFactoryDemo().execute() == [
            "We have a lovely Dog. It says woof. We also have dog food.",
            "We have a lovely Cat. It says meow. We also have cat food.",
        ]

    def test_builder(self):
        assert BuilderDemo().execute() == [
            "Floor: One | Size: Big",
            "Floor: More than One | Size: Small",
        ]

    def test_factory_method(self):
        assert FactoryMethodDemo().execute() == [
            "Opened text document 'notes'",
            "Opened spreadsheet document 'notes'",
        ]

    def test_prototype(self):
        assert PrototypeDemo().execute() == [
            "base: hp=100 weapon=sword",
            "archer: hp=100 weapon=bow",
            "veteran: hp=150 weapon=bow",
            "shared template: True",
        ]

    def test_prototype_clone_leaves_original_untouched(self):
        template = Template("goblin", {"hp": 10})
        original = Instance(template)
        clone = original.clone(hp=20)

        assert original.get("hp") == 10
        assert clone.get("hp") == 20
        assert clone.template is original.template

    def test_singleton(self):
        assert SingletonDemo().execute() == [
            "same instance: True",
            "theme seen through second reference: dark",
        ]

    def test_singleton_is_created_once_across_threads(self):
        reset_settings()
        seen = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            seen.append(get_settings())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(seen) == 8
        assert all(settings is seen[0] for settings in seen)
        reset_settings()


class TestStructuralDemos:
    """Test structural pattern demos."""

    def test_adapter(self):
        assert AdapterDemo().execute() == [
            "A Dog goes woof!",
            "A Human goes 'hello'",
            "A Car goes vroom!!!",
        ]

    def test_bridge(self):
        assert BridgeDemo().execute() == [
            "vector circle at 1:2 radius 7.5",
            "raster circle at 5:7 radius 27.5",
        ]

    def test_composite(self):
        assert CompositeDemo().execute() == [
            "project/ (22)",
            "  README.md (4)",
            "  src/ (18)",
            "    main.py (12)",
            "    util.py (6)",
        ]

    def test_decorator(self):
        assert DecoratorDemo().execute() == [
            "before: hello, world",
            "after: <i><b>hello, world</b></i>",
        ]

    def test_facade(self):
        assert FacadeDemo().execute() == [
            "cpu: freeze",
            "memory: load 'boot sector 0+512' at 0x7c00",
            "cpu: jump to 0x7c00",
            "cpu: execute",
        ]

    def test_flyweight(self):
        output = FlyweightDemo().execute()

        assert output[0] == "green oak at (1, 2)"
        assert output[-1] == "4 trees share 2 tree types"

    def test_flyweight_factory_shares_instances(self):
        factory = TreeTypeFactory()

        assert factory.get("oak", "green") is factory.get("oak", "green")
        assert factory.get("oak", "green") is not factory.get("oak", "red")

    def test_proxy(self):
        assert ProxyDemo().execute() == [
            "proxy created, loads so far: 0",
            "displaying photo.png",
            "displaying photo.png",
            "log: loading photo.png from disk",
        ]


class TestBehavioralDemos:
    """Test behavioral pattern demos."""

    def test_chain_of_responsibility(self):
        assert ChainOfResponsibilityDemo().execute() == [
            "request 2 handled by [0, 10)",
            "request 14 handled by [10, 20)",
            "request 22 handled by [20, 30)",
            "end of chain, no handler for 35",
        ]

    def test_command(self):
        assert CommandDemo().execute() == [
            "after append: 'Hello'",
            "after append: 'Hello, '",
            "after append: 'Hello, world'",
            "after undo: 'Hello, '",
            "after undo: 'Hello'",
        ]

    def test_command_undo_on_empty_history(self):
        document = Document()
        editor = Editor()
        editor.undo()
        editor.run(AppendCommand(document, "x"))

        assert document.text == "x"

    def test_interpreter(self):
        assert InterpreterDemo().execute() == [
            "w x + = 15",
            "w x z + + = 57",
            "w x + z + = 57",
            "'+' rejected: Operator '+' at position 0 needs two operands, found 0",
            "'w x' rejected: Expression leaves 2 operands without an operator",
            "'w y +' rejected: Unbound variable: 'y'",
        ]

    def test_iterator(self):
        assert IteratorDemo().execute() == [
            "in order: intro, verse, chorus, bridge, outro",
            "shuffled: intro, chorus, outro, verse, bridge",
        ]

    def test_mediator(self):
        assert MediatorDemo().execute() == [
            "alice received: ['[bob] hello alice']",
            "bob received: ['[alice] hi all']",
            "carol received: ['[alice] hi all', '[bob] hello alice']",
        ]

    def test_memento(self):
        output = MementoDemo().execute()

        assert output[1] == "balance -50, history ['+100', '-30', '-120']"
        assert output[2] == "overdrawn, rolled back"
        assert output[-1] == "balance 100, history ['+100']"

    def test_observer(self):
        assert ObserverDemo().execute() == [
            "HexViewer: Data 1 has value 0xa",
            "DecimalViewer: Data 1 has value 10",
            "HexViewer: Data 1 has value 0xf",
            "DecimalViewer: Data 1 has value 15",
            "DecimalViewer: Data 1 has value 3",
        ]

    def test_state(self):
        assert StateDemo().execute() == [
            "starting playback -> playing",
            "pausing -> paused",
            "resuming -> playing",
            "stopping -> stopped",
        ]

    def test_strategy(self):
        assert StrategyDemo().execute() == [
            "no_discount: 80.0",
            "ten_percent_off: 72.0",
            "on_sale: 40.0",
        ]

    def test_template_method(self):
        output = TemplateMethodDemo().execute()

        assert output[:5] == ["CsvReport:", "name", "ada", "grace", "2 rows"]
        assert output[-1] == "_2 rows_"

    def test_visitor(self):
        assert VisitorDemo().execute() == [
            "AreaVisitor Circle(radius=1.0): 3.14",
            "AreaVisitor Rectangle(width=2.0, height=3.0): 6.0",
            'SvgVisitor Circle(radius=1.0): <circle r="1.0"/>',
            'SvgVisitor Rectangle(width=2.0, height=3.0): <rect width="2.0" height="3.0"/>',
        ]

    def test_visitor_rejects_unknown_element(self):
        with pytest.raises(TypeError, match="AreaVisitor cannot visit str"):
            AreaVisitor().visit("square")

    def test_visitors_dispatch_independently(self):
        circle = Circle(2.0)

        assert AreaVisitor().visit(circle) == 12.57
        assert SvgVisitor().visit(circle) == '<circle r="2.0"/>'


class TestPatternDemoBase:
    """Test behaviour shared by every demo."""

    def test_execute_resets_output(self):
        demo = StrategyDemo()

        assert demo.execute() == demo.execute()

    def test_emit_joins_values(self):
        demo = StrategyDemo()
        demo.emit("a", 1, True)
        demo.emit("x", "y", sep="-")

        assert demo._lines == ["a 1 True", "x-y"]

    def test_repr(self):
        assert repr(VisitorDemo()) == "VisitorDemo(slug='visitor')"

    def test_participants_are_public(self, registry):
        for demo_cls in registry.get_all().values():
            private = [p.__name__ for p in demo_cls.participants if p.__name__.startswith("_")]

            assert private == [], demo_cls.slug

    def test_interpreter_shows_evaluate_entry_point(self):
        assert evaluate in InterpreterDemo.participants
