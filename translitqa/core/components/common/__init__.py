from translitqa.core.components.common.base import Component, ComponentResult

__all__ = ["Component", "ComponentResult"]
