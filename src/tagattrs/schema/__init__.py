"""Structured records shared across tagattrs components."""

from tagattrs.schema.config import TaggingConfig
from tagattrs.schema.tag_record import TagRecord

__all__ = ["TagRecord", "TaggingConfig"]
