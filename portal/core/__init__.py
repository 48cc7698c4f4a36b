"""Core: configuration, exceptions, and application bootstrap.

Import from the submodules (portal.core.config, portal.core.exceptions);
the pipeline in portal.infrastructure.config imports the exceptions, so
this package does not import config eagerly.
"""
