"""
FastAPI routers grouped by concern (submission API, frontend pages).

Each module exposes an APIRouter included by the app factory.
"""
