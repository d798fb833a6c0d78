"""HTTP middleware: request ID.

Applied in the main app; import and use from taskdesk.main.
"""

from taskdesk.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
