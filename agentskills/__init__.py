"""Discovery, parsing and registration of SKILL.md agent skills."""

__version__ = "0.1.0"
__all__ = ["skill"]