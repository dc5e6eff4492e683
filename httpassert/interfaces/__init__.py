"""Interface layer: FastAPI routers and Pydantic schemas."""
