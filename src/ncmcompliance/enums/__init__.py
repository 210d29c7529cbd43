"""Enums for the compliance report."""

from ncmcompliance.enums.enum_schema_variant import EnumSchemaVariant

__all__ = ["EnumSchemaVariant"]
