"""ResumeHub backend: user accounts and resume documents over MongoDB."""

__version__ = "1.0.0"
