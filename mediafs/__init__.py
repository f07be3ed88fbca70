"""On-demand transcoding filesystem: destination format and path resolution."""

__version__ = "0.1.0"
