"""The 23 GoF patterns as data, in catalog order."""

from typing import List

from gof_patterns.behavioral import (
    chain_of_responsibility,
    command,
    interpreter,
    iterator,
    mediator,
    memento,
    observer,
    state,
    strategy,
    template_method,
    visitor,
)
from gof_patterns.catalog.models import PatternCategory, PatternInfo
from gof_patterns.creational import abstract_factory, builder, factory_method, prototype, singleton
from gof_patterns.structural import adapter, bridge, composite, decorator, facade, flyweight, proxy

C = PatternCategory.CREATIONAL
S = PatternCategory.STRUCTURAL
B = PatternCategory.BEHAVIORAL

PATTERN_CATALOG: List[PatternInfo] = [
    # Creational
    PatternInfo(name="singleton", title="Singleton", category=C,
                intent="Ensure a class has one instance and provide a global access point to it.",
                demo=singleton.demo),
    PatternInfo(name="factory-method", title="Factory Method", category=C,
                intent="Create objects through a common interface, choosing the concrete class by label.",
                demo=factory_method.demo),
    PatternInfo(name="abstract-factory", title="Abstract Factory", category=C,
                intent="Create families of related objects without naming their concrete classes.",
                demo=abstract_factory.demo),
    PatternInfo(name="builder", title="Builder", category=C,
                intent="Assemble a complex object step by step from simple parts.",
                demo=builder.demo),
    PatternInfo(name="prototype", title="Prototype", category=C,
                intent="Create new objects by cloning a cached prototype.",
                demo=prototype.demo),
    # Structural
    PatternInfo(name="adapter", title="Adapter", category=S,
                intent="Translate one interface into another that clients expect.",
                demo=adapter.demo),
    PatternInfo(name="bridge", title="Bridge", category=S,
                intent="Decouple an abstraction from its implementation so both can vary.",
                demo=bridge.demo),
    PatternInfo(name="composite", title="Composite", category=S,
                intent="Treat individual objects and trees of objects uniformly.",
                demo=composite.demo),
    PatternInfo(name="decorator", title="Decorator", category=S,
                intent="Attach responsibilities to an object dynamically by wrapping it.",
                demo=decorator.demo),
    PatternInfo(name="facade", title="Facade", category=S,
                intent="Provide one simple interface in front of a set of classes.",
                demo=facade.demo),
    PatternInfo(name="flyweight", title="Flyweight", category=S,
                intent="Share fine-grained objects through a cache keyed by their intrinsic state.",
                demo=flyweight.demo),
    PatternInfo(name="proxy", title="Proxy", category=S,
                intent="Stand in for another object to control access, here by loading it lazily.",
                demo=proxy.demo),
    # Behavioral
    PatternInfo(name="chain-of-responsibility", title="Chain of Responsibility", category=B,
                intent="Pass a request along a chain of handlers, each deciding whether to act.",
                demo=chain_of_responsibility.demo),
    PatternInfo(name="command", title="Command", category=B,
                intent="Encapsulate a request as an object so it can be queued and executed later.",
                demo=command.demo),
    PatternInfo(name="interpreter", title="Interpreter", category=B,
                intent="Represent a grammar as objects and evaluate sentences recursively.",
                demo=interpreter.demo),
    PatternInfo(name="iterator", title="Iterator", category=B,
                intent="Access elements of a collection sequentially without exposing its storage.",
                demo=iterator.demo),
    PatternInfo(name="mediator", title="Mediator", category=B,
                intent="Route communication between objects through one mediator object.",
                demo=mediator.demo),
    PatternInfo(name="memento", title="Memento", category=B,
                intent="Capture and restore an object's state without breaking encapsulation.",
                demo=memento.demo),
    PatternInfo(name="observer", title="Observer", category=B,
                intent="Notify all dependents automatically when an object's state changes.",
                demo=observer.demo),
    PatternInfo(name="state", title="State", category=B,
                intent="Let an object change its behavior when its internal state changes.",
                demo=state.demo),
    PatternInfo(name="strategy", title="Strategy", category=B,
                intent="Make a family of algorithms interchangeable at runtime.",
                demo=strategy.demo),
    PatternInfo(name="template-method", title="Template Method", category=B,
                intent="Fix an algorithm's skeleton and let subclasses supply the steps.",
                demo=template_method.demo),
    PatternInfo(name="visitor", title="Visitor", category=B,
                intent="Add operations over an object structure through double dispatch.",
                demo=visitor.demo),
]
