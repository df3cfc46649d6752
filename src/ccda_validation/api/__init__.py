"""
FastAPI routes and wiring.

- routes.py: POST /referenceccdaservice/, GET /health
- dependencies.py: Settings and validation pipeline singletons
- models.py: Responses for operational endpoints
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request id tracing
"""

from ccda_validation.api import dependencies, error_handlers, models
from ccda_validation.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
