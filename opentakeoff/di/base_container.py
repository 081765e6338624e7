from typing import Any, Callable, Dict


class BaseContainer:
    """
    Minimal registry of singletons and factories.

    Keys are either classes (repository interfaces, use cases, services)
    or strings (database collections).
    """

    def __init__(self) -> None:
        self._singletons: Dict[Any, Any] = {}
        self._factories: Dict[Any, Callable[[], Any]] = {}

    def register_singleton(self, key: Any, instance: Any) -> None:
        """Register a shared instance, replacing any factory under the same key"""
        self._factories.pop(key, None)
        self._singletons[key] = instance

    def register_factory(self, key: Any, factory: Callable[[], Any]) -> None:
        """Register a factory called on every `get`"""
        self._singletons.pop(key, None)
        self._factories[key] = factory

    def is_registered(self, key: Any) -> bool:
        return key in self._singletons or key in self._factories

    def get(self, key: Any) -> Any:
        """
        Resolve a dependency.

        Raises:
            ValueError: If nothing is registered under the key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = key.__name__ if isinstance(key, type) else key
        raise ValueError(f"No registration found for {name}")
