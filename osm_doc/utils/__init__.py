"""Utility functions for OSM document processing."""

from osm_doc.utils.area_rules import AREA_RULES, tag_marks_area, tags_mark_area

__all__ = ['AREA_RULES', 'tag_marks_area', 'tags_mark_area']
