"""Command line interface for blobgzip."""
