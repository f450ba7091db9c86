"""HTTP middleware: timeout, request ID, correlation ID, security headers.

Applied in main app; order matters (last added = outermost).
"""

from tagfeed.middleware.request_ids import CorrelationIDMiddleware, RequestIDMiddleware
from tagfeed.middleware.security_headers import SecurityHeadersMiddleware
from tagfeed.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
