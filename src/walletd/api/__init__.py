"""API — FastAPI application, endpoint registry and RPC handlers."""
