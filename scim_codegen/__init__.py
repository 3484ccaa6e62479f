"""Generate SCIM SDK resource classes from SCIM resource schemas."""

__version__ = "0.1.0"
