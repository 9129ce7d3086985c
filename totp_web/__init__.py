"""
Flask enrollment server for totp_client: health check, static page and
stateless JSON helpers.
"""

from totp_web.app import create_app

__all__ = ['create_app']
