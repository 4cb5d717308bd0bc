"""API Layer — routers, dependency providers and global error handlers."""
