from .notes_request_handler import NotesRequestHandler, parse_detail_level

__all__ = ["NotesRequestHandler", "parse_detail_level"]
