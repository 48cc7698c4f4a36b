"""Route modules: health probes and server-rendered pages."""
