"""HTTP surface — FastAPI routers, dependencies and global error handlers."""
