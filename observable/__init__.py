from observable.bindable import BindableBase, ObservableProperty, PropertyChangedCallback

__all__ = ["BindableBase", "ObservableProperty", "PropertyChangedCallback"]
