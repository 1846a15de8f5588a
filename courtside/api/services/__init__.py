"""Service layer between the API routers and the core."""
