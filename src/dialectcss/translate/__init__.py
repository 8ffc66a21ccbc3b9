from dialectcss.translate.colors import hex_to_rgb, is_hex_color
from dialectcss.translate.values import ValueHandler, ValueTranslator, strip_quotes

__all__ = ["ValueTranslator", "ValueHandler", "hex_to_rgb", "is_hex_color", "strip_quotes"]
