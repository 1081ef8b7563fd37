"""affectiq: detect which workspace projects are dirty for a changeset."""

__version__ = "0.1.0"
