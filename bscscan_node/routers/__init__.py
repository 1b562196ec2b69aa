# Routers package
from .node import register_node_routes
from .utility import register_utility_routes

__all__ = [
    "register_node_routes",
    "register_utility_routes",
]
