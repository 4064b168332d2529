from collections.abc import Callable
from typing import Any

PropertyChangedCallback = Callable[[Any, str], None]

_MISSING = object()


class BindableBase:
    """Explicit subscribe/notify support for property changes.

    Subscribers are called with `(sender, property_name)` after a value
    actually changes.
    """

    def __init__(self) -> None:
        self._property_values: dict[str, Any] = {}
        self._subscribers: list[PropertyChangedCallback] = []

    def subscribe(self, callback: PropertyChangedCallback) -> Callable[[], None]:
        """Register a callback for property change notifications.

        Args:
            callback: Called as `callback(sender, property_name)`.

        Returns:
            Function that removes the subscription.

        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def get_property(self, name: str, default: Any = None) -> Any:
        return self._property_values.get(name, default)

    def set_property(self, name: str, value: Any) -> bool:
        """Store a property value and notify subscribers if it changed.

        Args:
            name: The property name.
            value: The new value.

        Returns:
            True if the value changed and subscribers were notified.

        """
        if self._property_values.get(name, _MISSING) == value:
            return False

        self._property_values[name] = value
        self.raise_property_changed(name)
        return True

    def raise_property_changed(self, name: str) -> None:
        for callback in list(self._subscribers):
            callback(self, name)


class ObservableProperty:
    """Descriptor that stores its value through `BindableBase.set_property`."""

    def __init__(self, default: Any = None):
        self.default = default
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: BindableBase | None, owner: type) -> Any:
        if instance is None:
            return self
        return instance.get_property(self.name, self.default)

    def __set__(self, instance: BindableBase, value: Any) -> None:
        instance.set_property(self.name, value)
