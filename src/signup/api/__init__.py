"""HTTP boundary - FastAPI application, routes and dependency wiring."""
