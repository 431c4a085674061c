"""Service layer — predicates, assertions and the namespaces built over them.

Services compose the domain resolvers into the public checks:
- ``predicates``: pure ``value -> bool`` functions.
- ``combinators``: ``is_any`` / ``is_all`` over one or more predicates.
- ``registry``: one row per predicate (name, function, message description).
- ``assertions``: raising counterparts generated from the registry.
- ``namespace``: the read-only ``is_`` / ``assert_`` surfaces.

Services import from domain, output and errors. They never import from config.
"""
