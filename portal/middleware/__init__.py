"""HTTP middleware: request size limit and security headers.

Applied in portal.main; order matters (last added = outermost).
"""

from portal.middleware.request_size_limit import RequestSizeLimitMiddleware
from portal.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
]
