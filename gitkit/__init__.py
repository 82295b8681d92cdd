"""gitkit: repositories, branches, remotes and commits as Python objects."""

__version__ = "0.1.0"
