"""Query language adapters."""
