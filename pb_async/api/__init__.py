"""
API client layer for pb-async

HTTP request/response pipeline for the PushBullet v2 REST API.
"""
from .client import APIClient, TOKEN_HEADER, validate_token

__all__ = ['APIClient', 'TOKEN_HEADER', 'validate_token']
