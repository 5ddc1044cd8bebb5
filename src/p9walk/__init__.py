"""p9walk: walk directory hierarchies, Plan 9 style."""

__version__ = "0.1.0"
