"""Pure domain logic: version arithmetic and manifest transformation."""
