"""Infrastructure helpers."""

from tagattrs.utils.format import format_tag_tree
from tagattrs.utils.logging import get_logger
from tagattrs.utils.validation import validate_attribute_names, validate_tag_names

__all__ = ["format_tag_tree", "get_logger", "validate_attribute_names", "validate_tag_names"]
