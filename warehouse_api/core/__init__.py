"""Cross-cutting concerns: settings and error handling."""
