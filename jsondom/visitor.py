"""Callback interface driven by a JSON parser."""

from __future__ import annotations


class JsonVisitor:
    """Receives parse events.

    Each callback returns True to continue; the defaults reject every event
    by returning False, so a subclass overrides exactly what it accepts.
    """

    def visit_null(self) -> bool:
        return False

    def visit_bool(self, val: bool) -> bool:
        return False

    def visit_u64(self, val: int) -> bool:
        return False

    def visit_i64(self, val: int) -> bool:
        return False

    def visit_f64(self, val: float) -> bool:
        return False

    def visit_str(self, value: str) -> bool:
        return False

    def visit_object_start(self, hint: int) -> bool:
        return False

    def visit_object_end(self, length: int) -> bool:
        return False

    def visit_array_start(self, hint: int) -> bool:
        return False

    def visit_array_end(self, length: int) -> bool:
        return False

    def visit_key(self, key: str) -> bool:
        return False