"""
Building portal data layer.

Per-building records (dues, finance items, board posts, forum proposals,
read markers) persisted in a key-value store with namespaced keys and
seed-on-first-access semantics.
"""
