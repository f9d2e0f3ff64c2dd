"""Validation rules over registered people."""

from profiles.validation.relation import check_relation

__all__ = ["check_relation"]
