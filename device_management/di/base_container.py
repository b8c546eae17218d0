# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')


class BaseContainer:
    """Base dependency injection container with core functionality"""

    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}
        self.factories: Dict[Type, Callable] = {}

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance

    def register_factory(self, interface: Type[TypeVarType], factory: Callable[[], TypeVarType]) -> None:
        """Register a factory function"""
        self.factories[interface] = factory

    def has(self, interface: Union[Type, str]) -> bool:
        """Whether a singleton or factory is registered for the key"""
        return interface in self.instances or interface in self.factories

    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get an instance of the requested type or string key"""
        if interface in self.instances:
            return self.instances[interface]

        if isinstance(interface, type) and interface in self.factories:
            return self.factories[interface]()

        raise ValueError(f"No registration found for {interface}")
