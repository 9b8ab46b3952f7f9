"""Service layer: pipeline type registry, catalog store and command facade."""
