"""Concrete protocol implementations."""

from huleedu_rest_client.implementations.auth_repository_impl import RestAuthRepository

__all__ = ["RestAuthRepository"]
