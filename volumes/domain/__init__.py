"""Domain entities and rules for volumes and their binds.

This package holds the in-memory representation of volumes and binds and
the rules that turn a volume's declared pool and plan into concrete plan
options. It does not talk to the database; persistence lives in
``volumes.repositories``.
"""
