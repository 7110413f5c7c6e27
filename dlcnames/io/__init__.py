"""File-content helpers kept apart from the pure text rules."""

from .xml_filter import decode_content, filter_xml_file, strip_illegal_xml_chars

__all__ = ["decode_content", "filter_xml_file", "strip_illegal_xml_chars"]
