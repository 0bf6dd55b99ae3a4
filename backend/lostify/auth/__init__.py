"""Authentication and authorization: passwords, JWTs, roles, endpoints."""
