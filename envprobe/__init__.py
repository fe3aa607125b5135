"""Print what a container runtime hands to a process, then idle."""

__version__ = "0.4.0"
