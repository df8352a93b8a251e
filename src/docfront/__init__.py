"""Documentation frontend: HTTPS-only markdown docs with go-import discovery."""

__version__ = "0.1.0"
