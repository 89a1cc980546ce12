"""Night Train: a two-chapter text adventure on a train that should not exist."""

__version__ = "0.1.0"
