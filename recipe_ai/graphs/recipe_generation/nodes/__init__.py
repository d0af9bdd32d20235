from .generate_node import generate_recipe
from .royco_node import apply_royco
from .illustrate_node import illustrate_recipe
from .format_node import format_recipe

__all__ = ["generate_recipe", "apply_royco", "illustrate_recipe", "format_recipe"]
