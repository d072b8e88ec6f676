"""Image files, visitors, shell commands and a prompt for a mock file system."""

__version__ = "0.1.0"
__all__ = ["commands", "errors", "files", "prompt", "visitors"]