"""Portal: layered INI configuration core with a thin FastAPI web shell."""
