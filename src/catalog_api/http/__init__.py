"""HTTP helpers shared by the API routers."""
