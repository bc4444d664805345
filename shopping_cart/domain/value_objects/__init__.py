"""値オブジェクト"""
from shopping_cart.domain.value_objects.application_config import ApplicationConfig
from shopping_cart.domain.value_objects.item import Item

__all__ = ["ApplicationConfig", "Item"]
