"""Infrastructure adapters implementing the domain ports.

All file I/O lives here: CSV records, image assets, PNG output.
"""
