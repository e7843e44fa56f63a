"""Cross-cutting concerns: exceptions, logging, middleware and error handlers."""
